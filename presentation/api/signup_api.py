import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from domain.entities import UserSignUp
from domain.repositories import UserRepository
from domain.use_cases.sign_up import InvalidEmailError, SignUpError, SignUpUseCase
from infrastructure.database import get_user_repository
from presentation.schemas.signup_schemas import SignUpResponse, UserSignUpRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Sign-up"])


def get_sign_up_use_case(repo: UserRepository = Depends(get_user_repository)) -> SignUpUseCase:
    """Dependency to get sign-up use case"""
    return SignUpUseCase(repo)


def _response(body: SignUpResponse, status_code: int) -> JSONResponse:
    return JSONResponse(body.model_dump(by_alias=True, exclude_none=True), status_code=status_code)


def _validation_message(error: ValidationError) -> str:
    if any(err["loc"][:1] == ("email",) for err in error.errors()):
        return InvalidEmailError.message
    return "Invalid sign-up request."


@router.post("/signup", response_model=SignUpResponse, response_model_exclude_none=True)
async def sign_up(request: Request, use_case: SignUpUseCase = Depends(get_sign_up_use_case)):
    """Register a new user from the sign-up form payload"""
    try:
        payload = UserSignUpRequest.model_validate(await request.json())
    except ValidationError as e:
        logger.warning(f"Rejected invalid sign-up request: {e}")
        return _response(SignUpResponse(success=False, message=_validation_message(e)), 400)
    except ValueError as e:
        logger.warning(f"Rejected malformed sign-up request: {e}")
        return _response(SignUpResponse(success=False, message="Invalid sign-up request."), 400)

    form = UserSignUp(email=payload.email, password=payload.password, confirm_password=payload.confirm_password)
    try:
        # Password hashing is CPU bound
        result = await run_in_threadpool(use_case.execute, form)
    except SignUpError as e:
        logger.info(f"Sign-up rejected: {e.message}")
        return _response(SignUpResponse(success=False, message=e.message), e.status_code)

    return _response(SignUpResponse(success=True, user_id=result.user_id), 201)


signup_router = router
