from __future__ import annotations

import argparse

from sqlmodel import Session

from profile_hub.db.init_db import init_db
from profile_hub.db.session import engine
from profile_hub.services.seed import TEST_USER_EMAIL, TEST_USER_PASSWORD, ensure_test_user


def main() -> None:
    parser = argparse.ArgumentParser(description='Create the account used by the profile smoke test.')
    parser.add_argument('--email', default=TEST_USER_EMAIL)
    parser.add_argument('--password', default=TEST_USER_PASSWORD)
    args = parser.parse_args()

    init_db()
    with Session(engine) as session:
        result = ensure_test_user(session, email=args.email, password=args.password)
    if result.created:
        print('Test user created successfully')
    else:
        print('Test user already exists')


if __name__ == '__main__':
    main()
