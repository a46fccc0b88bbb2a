"""Authentication views.

Email/password accounts issuing simplejwt access/refresh pairs. Logout
blacklists the refresh token; /auth/token/refresh is simplejwt's own view.
"""

import re
import logging
from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError
from django.core.validators import validate_email
from rest_framework import status
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import RefreshToken

logger = logging.getLogger(__name__)
User = get_user_model()

MIN_PASSWORD_LENGTH = 8
PASSWORD_RULES = [
    (r'[A-Z]', "Password must contain at least one uppercase letter"),
    (r'[a-z]', "Password must contain at least one lowercase letter"),
    (r'[0-9]', "Password must contain at least one number"),
]


def is_valid_email(email: str) -> bool:
    try:
        validate_email(email)
    except ValidationError:
        return False
    return True


def password_problem(password: str):
    """First broken password rule as a message, or None if the password is acceptable."""
    if len(password) < MIN_PASSWORD_LENGTH:
        return f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
    for pattern, message in PASSWORD_RULES:
        if not re.search(pattern, password):
            return message
    return None


def credentials(request):
    """(email, password) from the request body, email normalised to lower case."""
    email = str(request.data.get('email') or '').strip().lower()
    password = str(request.data.get('password') or '')
    return email, password


def user_payload(user):
    return {
        'email': user.email,
        'name': user.name,
        'authenticated': True,
    }


def session_response(user, status_code=status.HTTP_200_OK, **extra):
    """Signed-in user plus a fresh JWT pair."""
    refresh = RefreshToken.for_user(user)
    return Response({
        'success': True,
        **extra,
        'user': user_payload(user),
        'tokens': {'refresh': str(refresh), 'access': str(refresh.access_token)},
    }, status=status_code)


def error(message, status_code):
    return Response({'error': message}, status=status_code)


class RegisterView(APIView):
    """Create an account and sign it in."""

    permission_classes = [AllowAny]

    def post(self, request):
        email, password = credentials(request)
        if not email or not is_valid_email(email):
            return error('Invalid email address', status.HTTP_400_BAD_REQUEST)

        problem = password_problem(password)
        if problem:
            return error(problem, status.HTTP_400_BAD_REQUEST)

        if User.objects.filter(email=email).exists():
            return error('Email already registered', status.HTTP_409_CONFLICT)

        name = str(request.data.get('name') or '').strip() or email.split('@')[0]
        user = User.objects.create_user(email=email, password=password, name=name)
        logger.info(f"RegisterView.post: new user {email}")
        return session_response(user, status.HTTP_201_CREATED, message='Registration successful')


class LoginView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):
        email, password = credentials(request)
        if not email or not password:
            return error('Email and password are required', status.HTTP_400_BAD_REQUEST)

        user = User.objects.filter(email=email).first()
        if user is None or not user.check_password(password):
            logger.info(f"LoginView.post: failed login for {email}")
            return error('Invalid email or password', status.HTTP_401_UNAUTHORIZED)
        if not user.is_active:
            return error('Account is disabled', status.HTTP_403_FORBIDDEN)

        user.update_last_login()
        logger.info(f"LoginView.post: {email} signed in")
        return session_response(user)


class LogoutView(APIView):
    """Blacklist the posted refresh token; the access token simply expires."""

    permission_classes = [IsAuthenticated]

    def post(self, request):
        refresh_token = request.data.get('refresh')
        if refresh_token:
            try:
                RefreshToken(refresh_token).blacklist()
            except TokenError as e:
                logger.warning(f"LogoutView.post: invalid refresh token: {e}")
                return error('Invalid refresh token', status.HTTP_400_BAD_REQUEST)

        logger.info(f"LogoutView.post: {request.user.email} signed out")
        return Response({'success': True, 'message': 'Logged out successfully'})


class CurrentUserView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        user = request.user
        return Response({
            **user_payload(user),
            'created_at': user.created_at.isoformat(),
            'last_login': user.last_login.isoformat() if user.last_login else None,
        })
