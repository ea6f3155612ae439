import pytest
import os
from datetime import date
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Set env before importing app components
os.environ["APP_ENV"] = "testing"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"

from hrms.database import Base, get_db
from hrms.main import app
from fastapi.testclient import TestClient

# SQLite in-memory database configuration
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


# pysqlite starts transactions lazily and treats a leading SAVEPOINT as its own
# transaction, so RELEASE would commit for real. Hand transaction control to
# SQLAlchemy so the per-test outer transaction really wraps every savepoint.
@event.listens_for(engine, "connect")
def _disable_pysqlite_transactions(dbapi_connection, connection_record):
    dbapi_connection.isolation_level = None


@event.listens_for(engine, "begin")
def _emit_begin(conn):
    conn.exec_driver_sql("BEGIN")


TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_database():
    """Create tables once for the whole test session."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """Get a clean database session for each test function with rollback safety."""
    connection = engine.connect()
    transaction = connection.begin()
    # Service commits become savepoints inside the outer transaction
    session = TestingSessionLocal(bind=connection, join_transaction_mode="create_savepoint")

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture(scope="function")
def department(db_session):
    from hrms.models.department import Department
    dept = Department(name="Engineering", head="Layla Haddad", open_positions=2)
    db_session.add(dept)
    db_session.commit()
    return dept


@pytest.fixture(scope="function")
def employee(db_session, department):
    from hrms.models.employee import Employee
    emp = Employee(
        first_name="Omar",
        last_name="Saleh",
        email="omar.saleh@example.com",
        position="Engineer",
        department_id=department.id,
        hire_date=date(2018, 1, 1),
        salary=10000.0,
    )
    db_session.add(emp)
    db_session.commit()
    return emp


@pytest.fixture(scope="function")
def client(db_session):
    """Get a TestClient that uses the test database session via dependency override."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
