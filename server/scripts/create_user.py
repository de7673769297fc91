"""
Create a User and their Blog
============================

Bootstrap an account that can authenticate against /api/authenticate and
own entries.

Usage:
    python scripts/create_user.py
"""

import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from blog import create_app
from blog.core.di_container import DIContainer
from blog.model.blog import Blog
from blog.repo.postgre.interfaces import UserInterface


def create_user_with_blog():
    """Prompt for credentials, then create the user and a blog they own."""
    print("=" * 60)
    print("CREATE BLOG USER")
    print("=" * 60)

    app = create_app()

    with app.app_context():
        user_repo = DIContainer.get_instance().resolve(UserInterface.__name__)

        login = input("Login (default: user): ").strip() or "user"
        if user_repo.get_user_by_login(login):
            print(f"User '{login}' already exists")
            return 1

        password = input("Password (min 4 chars): ").strip()
        while len(password) < 4:
            print("Password must be at least 4 characters!")
            password = input("Password (min 4 chars): ").strip()

        email = input("Email (optional): ").strip() or None
        blog_name = input(f"Blog name (default: {login}'s blog): ").strip() or f"{login}'s blog"

        user = user_repo.create_user(login=login, password=password, email=email)
        blog = Blog(name=blog_name, handle=login.lower(), user_id=user.id).save()

        print("-" * 60)
        print(f"Created user '{user.login}' (id={user.id}) with blog '{blog.name}' (id={blog.id})")
        return 0


if __name__ == "__main__":
    sys.exit(create_user_with_blog())
