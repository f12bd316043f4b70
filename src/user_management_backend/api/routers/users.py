"""CRUD endpoints over the in-memory user store."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from user_management_backend.api.dependencies import document_bearer_auth
from user_management_backend.api.models import ErrorResponse, UserRequest, UserResponse
from user_management_backend.database import UserRepository, get_user_repository

router = APIRouter(
    prefix="/users",
    tags=["Users"],
    dependencies=[Depends(document_bearer_auth)],
    responses={
        status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)

RepositoryDep = Annotated[UserRepository, Depends(get_user_repository)]


@router.get(
    "",
    response_model=list[UserResponse],
    operation_id="GetAllUsers",
    summary="Get all users",
    description="Retrieves a list of all users in the system",
)
def list_users(repository: RepositoryDep) -> list[UserResponse]:
    return [
        UserResponse.model_validate(user, from_attributes=True)
        for user in repository.list_all()
    ]


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    operation_id="GetUserById",
    summary="Get user by ID",
    description="Retrieves a specific user by their ID",
    responses={status.HTTP_404_NOT_FOUND: {"description": "User not found"}},
)
def get_user(user_id: int, repository: RepositoryDep) -> UserResponse | Response:
    user = repository.get_by_id(user_id)
    if user is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return UserResponse.model_validate(user, from_attributes=True)


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    operation_id="CreateUser",
    summary="Create a new user",
    description="Creates a new user in the system",
)
def create_user(
    payload: UserRequest, response: Response, repository: RepositoryDep
) -> UserResponse:
    """Store a new user; any ID in the payload is ignored."""

    user = repository.add(name=payload.name, email=payload.email, age=payload.age)
    response.headers["Location"] = f"/users/{user.id}"
    return UserResponse.model_validate(user, from_attributes=True)


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    operation_id="UpdateUser",
    summary="Update an existing user",
    description="Updates an existing user's information",
    responses={status.HTTP_404_NOT_FOUND: {"description": "User not found"}},
)
def update_user(
    user_id: int, payload: UserRequest, repository: RepositoryDep
) -> UserResponse | Response:
    user = repository.update(
        user_id, name=payload.name, email=payload.email, age=payload.age
    )
    if user is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return UserResponse.model_validate(user, from_attributes=True)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    operation_id="DeleteUser",
    summary="Delete a user",
    description="Removes a user from the system",
    responses={status.HTTP_404_NOT_FOUND: {"description": "User not found"}},
)
def delete_user(user_id: int, repository: RepositoryDep) -> Response:
    if not repository.delete(user_id):
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
