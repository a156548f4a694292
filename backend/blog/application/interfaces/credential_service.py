"""Port for password hashing and login token issuance."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class TokenPair:
    access_token: str
    refresh_token: str


class CredentialService(ABC):

    @abstractmethod
    def hash_password(self, password: str) -> str:
        ...

    @abstractmethod
    def verify_password(self, password: str, password_hash: str) -> bool:
        """False for a wrong password or a malformed hash; never raises."""
        ...

    @abstractmethod
    def issue_tokens(self, user_id: int) -> TokenPair:
        ...
