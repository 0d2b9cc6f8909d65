from typing import Any, Dict, Optional

import strawberry

from postdeck.domain.models.enums import UserRole as DomainUserRole, InvitationStatus as DomainInvitationStatus


UserRole = strawberry.enum(DomainUserRole, name="UserRole")
InvitationStatus = strawberry.enum(DomainInvitationStatus, name="InvitationStatus")


@strawberry.type
class UserType:
    id: strawberry.ID
    email: str
    first_name: str
    last_name: str
    role: UserRole
    tenant_id: str
    is_verified: bool

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UserType":
        return cls(
            id=strawberry.ID(data["id"]),
            email=data["email"],
            first_name=data["first_name"],
            last_name=data["last_name"],
            role=DomainUserRole(data["role"]),
            tenant_id=data["tenant_id"],
            is_verified=data["is_verified"],
        )


@strawberry.type
class InvitationType:
    id: strawberry.ID
    email: str
    role: UserRole
    status: InvitationStatus
    invited_by_user_id: str
    expires_at: Optional[str] = None
    created_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "InvitationType":
        return cls(
            id=strawberry.ID(data["id"]),
            email=data["email"],
            role=DomainUserRole(data["role"]),
            status=DomainInvitationStatus(data["status"]),
            invited_by_user_id=data["invited_by_user_id"],
            expires_at=data.get("expires_at"),
            created_at=data.get("created_at"),
        )


@strawberry.type
class MessageResponse:
    message: str


@strawberry.type
class AuthPayload:
    user: UserType
    access_token: str


@strawberry.type
class AcceptInvitationResponse:
    message: str
    access_token: str


@strawberry.input
class AcceptInvitationInput:
    token: str
    first_name: str
    last_name: str
    email: str
    password: str


@strawberry.input
class InviteUserInput:
    email: str
    role: UserRole
