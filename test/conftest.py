import os

# SQLite en memoria para todos los tests; debe fijarse antes de importar la sesión de peewee.
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("ORM", "peewee")
