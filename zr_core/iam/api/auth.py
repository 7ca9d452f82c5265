# zr_core/iam/api/auth.py
from __future__ import annotations

import logging

from django.contrib.auth import authenticate, get_user_model
from django.contrib.auth.models import update_last_login
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.exceptions import AuthenticationFailed, PermissionDenied
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.serializers import TokenRefreshSerializer
from rest_framework_simplejwt.settings import api_settings as jwt_settings

from zr_core.iam.api.serializers import (
    DetailResponseSerializer,
    LoginRequestSerializer,
    LoginResponseSerializer,
    OrganizationSummarySerializer,
    OwnerLoginResponseSerializer,
    OwnerSerializer,
    RefreshRequestSerializer,
)
from zr_core.iam.tokens import clear_auth_cookies, issue_tokens, refresh_cookie_name, set_auth_cookies
from zr_core.organizations.models import Organization

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MSG = "Invalid credentials"


def login_response(*, user, body: dict, status_code: int = status.HTTP_200_OK) -> Response:
    """
    Issue a token pair for `user`: access goes in the body and both tokens
    go into HttpOnly cookies.
    """
    access, refresh = issue_tokens(user)
    if jwt_settings.UPDATE_LAST_LOGIN:
        update_last_login(None, user)

    res = Response({**body, "access": access}, status=status_code)
    set_auth_cookies(res, access=access, refresh=refresh)
    return res


class LoginView(APIView):
    """Organization login."""

    permission_classes = [AllowAny]

    @extend_schema(request=LoginRequestSerializer, responses={200: LoginResponseSerializer}, tags=["IAM"])
    def post(self, request):
        ser = LoginRequestSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        email = ser.validated_data["email"].strip().lower()
        user = authenticate(request, username=email, password=ser.validated_data["password"])
        if user is None:
            raise AuthenticationFailed(INVALID_CREDENTIALS_MSG)

        org = Organization.objects.filter(user=user).first()
        if org is None or not org.is_active:
            logger.info("Organization login refused user=%s active_org=%s", user.pk, bool(org and org.is_active))
            raise AuthenticationFailed(INVALID_CREDENTIALS_MSG)

        return login_response(
            user=user,
            body={
                "message": "Login successful",
                "organization": OrganizationSummarySerializer(org).data,
            },
        )


class OwnerLoginView(APIView):
    """Owner portal login (staff accounts only)."""

    permission_classes = [AllowAny]

    @extend_schema(request=LoginRequestSerializer, responses={200: OwnerLoginResponseSerializer}, tags=["Owner"])
    def post(self, request):
        ser = LoginRequestSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        email = ser.validated_data["email"].strip().lower()
        User = get_user_model()
        user = User.objects.filter(username=email, is_staff=True).first()
        if user is None or not user.check_password(ser.validated_data["password"]):
            raise AuthenticationFailed("Invalid email or password")
        if not user.is_active:
            raise PermissionDenied("Account is deactivated")

        return login_response(
            user=user,
            body={"message": "Login successful", "owner": OwnerSerializer(user).data},
        )


class RefreshView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(request=RefreshRequestSerializer, responses={200: DetailResponseSerializer}, tags=["IAM"])
    def post(self, request):
        refresh = request.COOKIES.get(refresh_cookie_name()) or request.data.get("refresh")

        serializer = TokenRefreshSerializer(data={"refresh": refresh})
        serializer.is_valid(raise_exception=True)

        access = serializer.validated_data["access"]
        new_refresh = serializer.validated_data.get("refresh", refresh)

        res = Response({"detail": "refreshed", "access": access}, status=status.HTTP_200_OK)
        set_auth_cookies(res, access=access, refresh=new_refresh)
        return res


class LogoutView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(request=None, responses={200: DetailResponseSerializer}, tags=["IAM"])
    def post(self, request):
        res = Response({"detail": "logged out"}, status=status.HTTP_200_OK)
        clear_auth_cookies(res)
        return res
