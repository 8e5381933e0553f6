"""DI container. Built once per app; deps.py resolves providers from app.state.container.

Process-wide objects (settings, engine, token codec, Firebase app) are
singletons. Services are factories that receive the request's session.
Tests swap pieces with `container.<provider>.override(...)`.
"""
from datetime import timedelta

from dependency_injector import containers, providers

from finance_tracker.auth import (AccessGuard, AuthenticationFlow,
                                  FirebaseTokenVerifier, IdentityBridge,
                                  SessionTokenCodec, create_firebase_app)
from finance_tracker.config import Settings
from finance_tracker.db.sessions import create_db_engine
from finance_tracker.services import (EarningService, ExpenseService,
                                      SavingService, UserDirectory,
                                      create_category_service,
                                      create_type_service)


class Container(containers.DeclarativeContainer):
    settings = providers.Singleton(Settings.from_env)

    engine = providers.Singleton(
        create_db_engine,
        settings.provided.database_url,
        echo=settings.provided.sql_echo,
    )

    token_codec = providers.Singleton(
        SessionTokenCodec,
        secret=settings.provided.jwt_secret,
        ttl=providers.Factory(timedelta, days=settings.provided.token_ttl_days),
    )

    firebase_app = providers.Singleton(
        create_firebase_app, settings.provided.firebase_service_account
    )
    token_verifier = providers.Singleton(FirebaseTokenVerifier, firebase_app)
    identity_bridge = providers.Singleton(IdentityBridge, token_verifier)

    # Per-request objects: call with the request's session / user directory.
    user_directory = providers.Factory(UserDirectory)
    access_guard = providers.Factory(AccessGuard, token_codec=token_codec)
    auth_flow = providers.Factory(
        AuthenticationFlow,
        identity_bridge=identity_bridge,
        token_codec=token_codec,
    )

    expense_service = providers.Factory(ExpenseService)
    earning_service = providers.Factory(EarningService)
    saving_service = providers.Factory(SavingService)
    category_service = providers.Factory(create_category_service)
    type_service = providers.Factory(create_type_service)
