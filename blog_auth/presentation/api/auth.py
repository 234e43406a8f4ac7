"""Authentication endpoints (form posts answered with redirects)."""

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import RedirectResponse

from blog_auth.application.dtos.auth_dto import LoginForm, RedirectTarget, RegistrationForm
from blog_auth.application.services.login_handler import LoginHandler
from blog_auth.application.services.registration_handler import RegistrationHandler
from blog_auth.domain.services.notifier import INotifier
from blog_auth.presentation.dependencies import (
    get_login_handler,
    get_notifier,
    get_registration_handler,
)
from blog_auth.presentation.flash import FlashMessage, pop_flashed_messages

router = APIRouter(tags=["authentication"])


def _see_other(target: RedirectTarget) -> RedirectResponse:
    return RedirectResponse(url=target.value, status_code=status.HTTP_303_SEE_OTHER)


@router.get(
    "/register",
    summary="Registration view",
    description="Returns flash messages queued for the registration page and clears them.",
)
async def register_view(request: Request) -> dict[str, list[FlashMessage]]:
    return {"messages": pop_flashed_messages(request.session)}


@router.post(
    "/register",
    response_class=RedirectResponse,
    status_code=status.HTTP_303_SEE_OTHER,
    summary="Register a new user",
    description="Validate, check for an existing account, hash the password and create the user.",
)
async def register(
    name: str = Form(default=""),
    email: str = Form(default=""),
    password: str = Form(default=""),
    notifier: INotifier = Depends(get_notifier),
    handler: RegistrationHandler = Depends(get_registration_handler),
) -> RedirectResponse:
    """
    Register a user from a submitted form.

    Always answers 303: /register on invalid input, /login otherwise.
    The outcome is carried by the flash message.
    """
    form = RegistrationForm(name=name, email=email, password=password)
    return _see_other(await handler.register(form, notifier))


@router.get(
    "/login",
    summary="Login view",
    description="Returns flash messages queued for the login page and clears them.",
)
async def login_view(request: Request) -> dict[str, list[FlashMessage]]:
    return {"messages": pop_flashed_messages(request.session)}


@router.post(
    "/login",
    response_class=RedirectResponse,
    status_code=status.HTTP_303_SEE_OTHER,
    summary="User login",
    description="Verify email and password and establish the session.",
)
async def login(
    request: Request,
    email: str = Form(default=""),
    password: str = Form(default=""),
    notifier: INotifier = Depends(get_notifier),
    handler: LoginHandler = Depends(get_login_handler),
) -> RedirectResponse:
    """
    Log a user in.

    Answers 303 to / on success, to /login otherwise. Unknown email and
    wrong password are indistinguishable.
    """
    form = LoginForm(email=email, password=password)
    return _see_other(await handler.login(form, request.session, notifier))


@router.get(
    "/logout",
    response_class=RedirectResponse,
    status_code=status.HTTP_303_SEE_OTHER,
    summary="Log out",
)
async def logout(request: Request) -> RedirectResponse:
    """Drop the whole session and go back to the login page."""
    request.session.clear()
    return _see_other(RedirectTarget.LOGIN)
