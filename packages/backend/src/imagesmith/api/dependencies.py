"""FastAPI dependencies.

Learn: create_app() builds the collaborators once and parks them on
app.state; these helpers hand them to route functions via Depends().
Tests swap implementations by passing their own store to create_app().
"""

from fastapi import Request

from imagesmith.db.store import AccountStore
from imagesmith.services.account_service import AccountService


def get_account_service(request: Request) -> AccountService:
    return request.app.state.account_service


def get_account_store(request: Request) -> AccountStore:
    return request.app.state.account_store
