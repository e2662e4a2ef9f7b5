import base64
import json

from models import CurrentUser

USERINFO_HEADER = 'X-Apigateway-Api-Userinfo'


def gen_token(user: CurrentUser) -> dict[str, str]:
    return {'sub': user.username, 'role': user.role}


def encode_token(token: dict[str, str]) -> dict[str, str]:
    token_encoded = base64.urlsafe_b64encode(json.dumps(token).encode()).decode()
    return {USERINFO_HEADER: token_encoded}
