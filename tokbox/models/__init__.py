from .session_model import CredentialPair, Recording, Role, Session

__all__ = ["CredentialPair", "Recording", "Role", "Session"]
