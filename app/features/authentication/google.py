"""
➡️ But : Parler à Google (OAuth 2.0 / OpenID Connect) pour la connexion "Se connecter avec Google".

GoogleOAuthClient :

authorization_url(state) → URL vers laquelle rediriger le navigateur.

fetch_profile(code) → échange le code contre un access token puis lit le profil (sub, email, nom).

Aucune écriture en base ici : la création/recherche du compte est faite par AuthService.
"""

import logging
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlencode

import httpx

logger = logging.getLogger(__name__)

AUTHORIZE_URL = "https://accounts.google.com/o/oauth2/v2/auth"
TOKEN_URL = "https://oauth2.googleapis.com/token"
USERINFO_URL = "https://openidconnect.googleapis.com/v1/userinfo"
SCOPES = ("openid", "email", "profile")


class OAuthError(Exception):
    """Échec du handshake OAuth (fournisseur, state, code...)."""
    pass


@dataclass(frozen=True)
class GoogleProfile:
    id: str
    email: str
    name: Optional[str] = None


class GoogleOAuthClient:
    def __init__(
        self,
        *,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri
        self.timeout = timeout
        self.transport = transport

    def authorization_url(self, state: str) -> str:
        params = {
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "response_type": "code",
            "scope": " ".join(SCOPES),
            "state": state,
            "prompt": "select_account",
        }
        return f"{AUTHORIZE_URL}?{urlencode(params)}"

    def fetch_profile(self, code: str) -> GoogleProfile:
        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                token_resp = client.post(
                    TOKEN_URL,
                    data={
                        "code": code,
                        "client_id": self.client_id,
                        "client_secret": self.client_secret,
                        "redirect_uri": self.redirect_uri,
                        "grant_type": "authorization_code",
                    },
                )
                token_resp.raise_for_status()
                access_token = token_resp.json().get("access_token")
                if not access_token:
                    raise OAuthError("Provider returned no access token")

                info_resp = client.get(
                    USERINFO_URL,
                    headers={"Authorization": f"Bearer {access_token}"},
                )
                info_resp.raise_for_status()
                info = info_resp.json()
        except httpx.HTTPError as e:
            logger.warning("Google OAuth exchange failed: %s", e)
            raise OAuthError("Provider exchange failed") from e

        if not info.get("sub"):
            raise OAuthError("Provider profile has no subject")

        return GoogleProfile(
            id=str(info["sub"]),
            email=info.get("email") or "",
            name=info.get("name"),
        )
