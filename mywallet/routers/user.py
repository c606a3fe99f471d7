# FILE: mywallet/routers/user.py

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

# Pydantic schemas for sign-up and sign-in
from mywallet.schemas.user import UserCreate, SignInRequest, SignInResponse

# Service functions that interact with the database
from mywallet.services.user import register_user, authenticate_user
from mywallet.services.session import issue_token
from mywallet.services.errors import DuplicateUser, UserNotFound, InvalidCredentials

# Database session provider
from mywallet.database import get_db

router = APIRouter(tags=["users"])

# Same message for unknown e-mail and wrong password
BAD_CREDENTIALS = "Incorrect e-mail or password."


@router.post("/signup", status_code=status.HTTP_201_CREATED, response_class=Response)
def sign_up(user: UserCreate, db: Session = Depends(get_db)):
    """
    Register a new user: POST /signup

    1. The body has already passed schema validation (422 otherwise).
    2. A taken e-mail yields 409.
    3. On success the user is stored with a bcrypt hash and an empty ledger;
       the response is 201 with no body.
    """
    try:
        register_user(user, db)
    except DuplicateUser:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="This user is already registered."
        )
    return Response(status_code=status.HTTP_201_CREATED)


@router.post("/signin", response_model=SignInResponse)
def sign_in(credentials: SignInRequest, db: Session = Depends(get_db)):
    """
    Exchange e-mail and password for a bearer token: POST /signin

    For security, an unknown e-mail and a wrong password produce the same 401.
    """
    try:
        user = authenticate_user(credentials.email, credentials.password, db)
    except (UserNotFound, InvalidCredentials):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=BAD_CREDENTIALS)

    token = issue_token(user.id, db)
    return SignInResponse(name=user.name, token=token)
