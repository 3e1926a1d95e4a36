"""Google Cloud client construction for the Datastore backend."""

from infrastructure.clients.google.session_provider import SessionProvider

__all__ = ["SessionProvider"]
