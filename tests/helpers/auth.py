from blog.utils.jwt_helpers import generate_access_token


def bearer_headers(app, login: str) -> dict:
    """Authorization header carrying a freshly issued token for ``login``."""
    with app.app_context():
        token = generate_access_token(login)
    return {"Authorization": f"Bearer {token}"}
