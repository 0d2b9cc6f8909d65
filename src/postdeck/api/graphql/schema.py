from typing import List

import strawberry
from strawberry.fastapi import GraphQLRouter
from strawberry.types import Info

from postdeck.api.schemas.auth import (
    AcceptInvitationRequest,
    EmailRequest,
    LoginRequest,
    RegisterRequest,
    ResetPasswordRequest,
)
from postdeck.domain.services import AuthService, InvitationService
from .context import current_user, get_context
from .extensions import PostDeckErrorExtension
from .permissions import IsAuthenticated
from .types import (
    AcceptInvitationInput,
    AcceptInvitationResponse,
    AuthPayload,
    InvitationType,
    InviteUserInput,
    MessageResponse,
    UserType,
)
from .validation import validate_input


@strawberry.type
class Query:
    @strawberry.field
    def verify_email(self, token: str) -> MessageResponse:
        result = AuthService.verify_email(token=token)
        return MessageResponse(message=result["message"])

    @strawberry.field(permission_classes=[IsAuthenticated])
    def me(self, info: Info) -> UserType:
        user = AuthService.validate_user(user_id=current_user(info)["user_id"])
        return UserType.from_dict(user)

    @strawberry.field(permission_classes=[IsAuthenticated])
    def pending_invitations(self, info: Info) -> List[InvitationType]:
        invitations = InvitationService.list_pending_invitations(user_id=current_user(info)["user_id"])
        return [InvitationType.from_dict(item) for item in invitations]

    @strawberry.field(permission_classes=[IsAuthenticated])
    def organization_users(self, info: Info) -> List[UserType]:
        users = InvitationService.get_organization_users(user_id=current_user(info)["user_id"])
        return [UserType.from_dict(item) for item in users]


@strawberry.type
class Mutation:
    @strawberry.mutation
    def register(self, email: str, password: str, first_name: str, last_name: str,
                 organization_name: str) -> MessageResponse:
        payload = validate_input(
            RegisterRequest, email=email, password=password, first_name=first_name,
            last_name=last_name, organization_name=organization_name,
        )
        result = AuthService.register(**payload.model_dump())
        return MessageResponse(message=result["message"])

    @strawberry.mutation
    def login(self, email: str, password: str) -> AuthPayload:
        payload = validate_input(LoginRequest, email=email, password=password)
        result = AuthService.login(email=payload.email, password=payload.password)
        return AuthPayload(
            user=UserType.from_dict(result["data"]["user"]),
            access_token=result["data"]["access_token"],
        )

    @strawberry.mutation
    def request_password_reset(self, email: str) -> MessageResponse:
        payload = validate_input(EmailRequest, email=email)
        result = AuthService.request_password_reset(email=payload.email)
        return MessageResponse(message=result["message"])

    @strawberry.mutation
    def reset_password(self, token: str, new_password: str) -> MessageResponse:
        payload = validate_input(ResetPasswordRequest, token=token, new_password=new_password)
        result = AuthService.reset_password(token=payload.token, new_password=payload.new_password)
        return MessageResponse(message=result["message"])

    @strawberry.mutation(permission_classes=[IsAuthenticated])
    def resend_verification_email(self, info: Info) -> MessageResponse:
        result = AuthService.resend_verification_email(email=current_user(info)["email"])
        return MessageResponse(message=result["message"])

    @strawberry.mutation(permission_classes=[IsAuthenticated])
    def invite_user(self, info: Info, input: InviteUserInput) -> InvitationType:
        payload = validate_input(EmailRequest, email=input.email)
        result = InvitationService.invite_user(
            inviter_id=current_user(info)["user_id"],
            email=payload.email,
            role=input.role,
        )
        return InvitationType.from_dict(result["data"])

    @strawberry.mutation(permission_classes=[IsAuthenticated])
    def revoke_invitation(self, info: Info, invitation_id: strawberry.ID) -> bool:
        return InvitationService.revoke_invitation(
            user_id=current_user(info)["user_id"],
            invitation_id=str(invitation_id),
        )

    @strawberry.mutation
    def accept_invitation(self, input: AcceptInvitationInput) -> AcceptInvitationResponse:
        payload = validate_input(
            AcceptInvitationRequest,
            token=input.token,
            email=input.email,
            first_name=input.first_name,
            last_name=input.last_name,
            password=input.password,
        )
        result = AuthService.accept_invitation(**payload.model_dump())
        return AcceptInvitationResponse(
            message=result["message"],
            access_token=result["data"]["access_token"],
        )


schema = strawberry.Schema(query=Query, mutation=Mutation, extensions=[PostDeckErrorExtension])


def create_graphql_router(graphiql: bool = False) -> GraphQLRouter:
    return GraphQLRouter(
        schema,
        graphql_ide="graphiql" if graphiql else None,
        context_getter=get_context,
    )
