import logging
import os

from evtracker.core.config import load_settings
from evtracker.db.session import make_engine, make_session_factory
from evtracker.services.users import create_user, find_user_by_email

log = logging.getLogger(__name__)


def main():
    email = os.environ.get("SEED_ADMIN_EMAIL", "admin@evcalculator.com")
    password = os.environ.get("SEED_ADMIN_PASS")
    name = os.environ.get("SEED_ADMIN_NAME", "Admin User")
    if not password:
        raise SystemExit("SEED_ADMIN_PASS is required")

    settings = load_settings()
    engine = make_engine(settings.database_url)
    SessionLocal = make_session_factory(engine)

    with SessionLocal() as db:
        if find_user_by_email(db, email) is not None:
            log.info("admin %s already exists", email)
            return
        create_user(db, email=email, password=password, name=name, role="admin")
        log.info("created admin %s", email)

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
