# client/core/session.py

from dataclasses import dataclass


@dataclass
class ClientContext:
    """
    Signed-in identity for one browser session.
    Passed explicitly to every page handler and API call.
    """
    username: str | None = None
    access_token: str | None = None

    @property
    def signed_in(self) -> bool:
        return bool(self.username and self.access_token)

    def auth_headers(self) -> dict:
        if not self.access_token:
            return {}
        return {"Authorization": f"Bearer {self.access_token}"}

    def sign_in(self, username: str, access_token: str):
        self.username = username
        self.access_token = access_token

    def restore(self, access_token: str, lookup) -> bool:
        """
        Signs back in with a stored token once `lookup(ctx)` confirms it.
        The username always comes from the server's answer.
        """
        self.access_token = access_token
        info = lookup(self)
        if not isinstance(info, dict) or info.get("error") or not info.get("username"):
            self.clear()
            return False
        self.sign_in(info["username"], access_token)
        return True

    def clear(self):
        self.username = None
        self.access_token = None
