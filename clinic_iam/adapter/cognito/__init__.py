"""Cognito user pool adapter."""

from .gateway import MAX_LIST_LIMIT, CognitoIdentityGateway
from .mapper import CognitoMapper

__all__ = [
    "CognitoIdentityGateway",
    "CognitoMapper",
    "MAX_LIST_LIMIT",
]
