from .invitation_service import InvitationService

__all__ = ["InvitationService"]
