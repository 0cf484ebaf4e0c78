"""
API Dependencies

Builds services for the endpoints by hand: each service gets its session,
repository, settings and (for users) uniqueness guard as constructor
arguments. Nothing is discovered or registered implicitly.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from app.core.config import Settings, settings
from app.db.session import get_db
from app.models import Category, Good, User
from app.repositories import AuditStamper, SQLAlchemyRepository
from app.services.core.category_service import CategoryService
from app.services.core.good_service import GoodService
from app.services.core.uniqueness import UniquenessGuard
from app.services.core.user_service import UserService


def get_settings() -> Settings:
    return settings


def get_audit_stamper() -> AuditStamper:
    """
    Get the audit stamper

    Tests override this to inject a deterministic clock.
    """
    return AuditStamper()


def get_good_service(
    db: Session = Depends(get_db),
    stamper: AuditStamper = Depends(get_audit_stamper),
    app_settings: Settings = Depends(get_settings),
) -> GoodService:
    """
    Get Good Service instance with database session

    Returns:
        GoodService: Configured goods service
    """
    return GoodService(
        db=db,
        repository=SQLAlchemyRepository(Good, db, stamper),
        settings=app_settings,
    )


def get_category_service(
    db: Session = Depends(get_db),
    stamper: AuditStamper = Depends(get_audit_stamper),
    app_settings: Settings = Depends(get_settings),
) -> CategoryService:
    """
    Get Category Service instance with database session

    Returns:
        CategoryService: Configured category service
    """
    return CategoryService(
        db=db,
        repository=SQLAlchemyRepository(Category, db, stamper),
        settings=app_settings,
    )


def get_user_service(
    db: Session = Depends(get_db),
    stamper: AuditStamper = Depends(get_audit_stamper),
    app_settings: Settings = Depends(get_settings),
) -> UserService:
    """
    Get User Service instance with database session

    The username uniqueness guard shares the service's repository, so the
    check and the write run in the same transaction.

    Returns:
        UserService: Configured user service
    """
    repository = SQLAlchemyRepository(User, db, stamper)
    return UserService(
        db=db,
        repository=repository,
        settings=app_settings,
        guard=UniquenessGuard(repository, field="username", label="用户名"),
    )
