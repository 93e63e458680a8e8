import re

from sqlalchemy.dialects.postgresql.base import PGDialect
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_marshmallow import Marshmallow
from flask_cors import CORS


def _allow_hosted_server_versions():
    # Hosted Postgres-compatible stores (CockroachDB) answer SELECT version()
    # with a string the stock dialect refuses to parse.
    stock_initialize = PGDialect.initialize

    def initialize(self, connection):
        try:
            stock_initialize(self, connection)
        except AssertionError:
            banner = connection.exec_driver_sql("SELECT version()").scalar() or ""
            found = re.search(r"v?(\d+)\.(\d+)", banner)
            self.server_version_info = (int(found.group(1)), int(found.group(2))) if found else (25, 0)

    PGDialect.initialize = initialize


_allow_hosted_server_versions()

db = SQLAlchemy()
migrate = Migrate()
ma = Marshmallow()
cors = CORS()
