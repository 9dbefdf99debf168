# -*- coding: utf-8 -*-

from __future__ import annotations

import sqlite3
from typing import Callable, Optional


def init_schema(conn: sqlite3.Connection) -> None:
    c = conn.cursor()
    c.execute("""
    CREATE TABLE IF NOT EXISTS companies(
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL,
        industry TEXT DEFAULT '',
        address TEXT DEFAULT '',
        phone TEXT DEFAULT '',
        email TEXT DEFAULT '',
        website TEXT DEFAULT '',
        tax_number TEXT DEFAULT '',
        description TEXT DEFAULT '',
        created_at TEXT NOT NULL,
        updated_at TEXT NOT NULL
    );""")

    c.execute("""
    CREATE TABLE IF NOT EXISTS users(
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        email TEXT UNIQUE NOT NULL,
        first_name TEXT DEFAULT '',
        last_name TEXT DEFAULT '',
        phone TEXT DEFAULT '',
        company_id INTEGER,
        role TEXT NOT NULL DEFAULT 'employee',
        salt TEXT NOT NULL,
        pass_hash TEXT NOT NULL,
        is_active INTEGER NOT NULL DEFAULT 1,
        last_login_at TEXT,
        created_at TEXT NOT NULL,
        updated_at TEXT NOT NULL,
        FOREIGN KEY(company_id) REFERENCES companies(id) ON DELETE SET NULL
    );""")

    c.execute("""
    CREATE TABLE IF NOT EXISTS departments(
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        company_id INTEGER NOT NULL,
        name TEXT NOT NULL,
        description TEXT DEFAULT '',
        manager_id INTEGER,
        budget REAL,
        created_at TEXT NOT NULL,
        updated_at TEXT NOT NULL,
        UNIQUE(company_id, name),
        FOREIGN KEY(company_id) REFERENCES companies(id) ON DELETE CASCADE,
        FOREIGN KEY(manager_id) REFERENCES employees(id) ON DELETE SET NULL
    );""")

    c.execute("""
    CREATE TABLE IF NOT EXISTS employees(
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        company_id INTEGER NOT NULL,
        user_id INTEGER,
        first_name TEXT NOT NULL,
        last_name TEXT NOT NULL,
        email TEXT NOT NULL,
        phone TEXT DEFAULT '',
        department_id INTEGER,
        position TEXT NOT NULL,
        start_date TEXT NOT NULL,
        salary REAL NOT NULL DEFAULT 0,
        status TEXT NOT NULL DEFAULT 'active',
        performance_score REAL NOT NULL DEFAULT 0,
        address TEXT DEFAULT '',
        emergency_contact TEXT DEFAULT '',
        notes TEXT DEFAULT '',
        created_at TEXT NOT NULL,
        updated_at TEXT NOT NULL,
        FOREIGN KEY(company_id) REFERENCES companies(id) ON DELETE CASCADE,
        FOREIGN KEY(department_id) REFERENCES departments(id) ON DELETE SET NULL,
        FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE SET NULL
    );""")

    c.execute("""
    CREATE TABLE IF NOT EXISTS leaves(
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        employee_id INTEGER NOT NULL,
        leave_type TEXT NOT NULL,
        start_date TEXT NOT NULL,
        end_date TEXT NOT NULL,
        days INTEGER NOT NULL,
        status TEXT NOT NULL DEFAULT 'pending',
        reason TEXT DEFAULT '',
        approved_by TEXT DEFAULT '',
        approved_at TEXT,
        rejection_reason TEXT DEFAULT '',
        applied_at TEXT NOT NULL,
        FOREIGN KEY(employee_id) REFERENCES employees(id) ON DELETE CASCADE
    );""")

    c.execute("""
    CREATE TABLE IF NOT EXISTS performance(
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        employee_id INTEGER NOT NULL,
        review_period TEXT NOT NULL,
        score REAL NOT NULL,
        goals TEXT DEFAULT '',
        achievements TEXT DEFAULT '',
        feedback TEXT DEFAULT '',
        reviewed_by INTEGER,
        review_date TEXT NOT NULL,
        FOREIGN KEY(employee_id) REFERENCES employees(id) ON DELETE CASCADE
    );""")

    c.execute("""
    CREATE TABLE IF NOT EXISTS payroll(
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        employee_id INTEGER NOT NULL,
        month TEXT NOT NULL,
        base_salary REAL NOT NULL,
        bonuses REAL NOT NULL DEFAULT 0,
        deductions REAL NOT NULL DEFAULT 0,
        net_salary REAL NOT NULL,
        payment_date TEXT,
        status TEXT NOT NULL DEFAULT 'pending',
        created_at TEXT NOT NULL,
        updated_at TEXT NOT NULL,
        UNIQUE(employee_id, month),
        FOREIGN KEY(employee_id) REFERENCES employees(id) ON DELETE CASCADE
    );""")

    c.execute("""
    CREATE TABLE IF NOT EXISTS trainings(
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        company_id INTEGER NOT NULL,
        title TEXT NOT NULL,
        description TEXT DEFAULT '',
        instructor TEXT DEFAULT '',
        category TEXT DEFAULT '',
        start_date TEXT,
        end_date TEXT,
        capacity INTEGER NOT NULL DEFAULT 0,
        status TEXT NOT NULL DEFAULT 'planned',
        created_at TEXT NOT NULL,
        updated_at TEXT NOT NULL,
        FOREIGN KEY(company_id) REFERENCES companies(id) ON DELETE CASCADE
    );""")

    c.execute("""
    CREATE TABLE IF NOT EXISTS training_enrollments(
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        training_id INTEGER NOT NULL,
        employee_id INTEGER NOT NULL,
        status TEXT NOT NULL DEFAULT 'enrolled',
        score REAL,
        enrolled_at TEXT NOT NULL,
        completed_at TEXT,
        UNIQUE(training_id, employee_id),
        FOREIGN KEY(training_id) REFERENCES trainings(id) ON DELETE CASCADE,
        FOREIGN KEY(employee_id) REFERENCES employees(id) ON DELETE CASCADE
    );""")

    c.execute("""
    CREATE TABLE IF NOT EXISTS jobs(
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        company_id INTEGER NOT NULL,
        title TEXT NOT NULL,
        department_id INTEGER,
        description TEXT DEFAULT '',
        requirements TEXT DEFAULT '',
        location TEXT DEFAULT '',
        employment_type TEXT NOT NULL DEFAULT 'full-time',
        salary_min REAL,
        salary_max REAL,
        status TEXT NOT NULL DEFAULT 'draft',
        created_at TEXT NOT NULL,
        updated_at TEXT NOT NULL,
        FOREIGN KEY(company_id) REFERENCES companies(id) ON DELETE CASCADE,
        FOREIGN KEY(department_id) REFERENCES departments(id) ON DELETE SET NULL
    );""")

    c.execute("""
    CREATE TABLE IF NOT EXISTS job_applications(
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        job_id INTEGER NOT NULL,
        candidate_name TEXT NOT NULL,
        candidate_email TEXT NOT NULL,
        candidate_phone TEXT DEFAULT '',
        resume_url TEXT DEFAULT '',
        cover_letter TEXT DEFAULT '',
        status TEXT NOT NULL DEFAULT 'submitted',
        notes TEXT DEFAULT '',
        applied_at TEXT NOT NULL,
        updated_at TEXT NOT NULL,
        FOREIGN KEY(job_id) REFERENCES jobs(id) ON DELETE CASCADE
    );""")

    c.execute("""
    CREATE TABLE IF NOT EXISTS interviews(
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        application_id INTEGER NOT NULL,
        interviewer_id INTEGER,
        scheduled_at TEXT NOT NULL,
        interview_type TEXT DEFAULT '',
        status TEXT NOT NULL DEFAULT 'scheduled',
        feedback TEXT DEFAULT '',
        rating INTEGER,
        created_at TEXT NOT NULL,
        FOREIGN KEY(application_id) REFERENCES job_applications(id) ON DELETE CASCADE
    );""")

    c.execute("""
    CREATE TABLE IF NOT EXISTS notifications(
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        user_id TEXT NOT NULL,
        title TEXT NOT NULL,
        message TEXT NOT NULL,
        type TEXT NOT NULL DEFAULT 'info',
        is_read INTEGER NOT NULL DEFAULT 0,
        action_url TEXT DEFAULT '',
        created_at TEXT NOT NULL,
        read_at TEXT
    );""")

    c.execute("""
    CREATE TABLE IF NOT EXISTS messages(
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        from_user_id TEXT NOT NULL,
        to_user_id TEXT NOT NULL,
        subject TEXT DEFAULT '',
        content TEXT NOT NULL,
        is_read INTEGER NOT NULL DEFAULT 0,
        read_at TEXT,
        created_at TEXT NOT NULL
    );""")

    c.execute("""
    CREATE TABLE IF NOT EXISTS documents(
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        company_id INTEGER NOT NULL,
        employee_id INTEGER,
        title TEXT NOT NULL,
        category TEXT DEFAULT '',
        original_name TEXT NOT NULL,
        file_path TEXT NOT NULL,
        mime TEXT NOT NULL,
        size_bytes INTEGER NOT NULL,
        sha256 TEXT NOT NULL,
        uploaded_by TEXT DEFAULT '',
        uploaded_at TEXT NOT NULL,
        active INTEGER NOT NULL DEFAULT 1,
        FOREIGN KEY(company_id) REFERENCES companies(id) ON DELETE CASCADE,
        FOREIGN KEY(employee_id) REFERENCES employees(id) ON DELETE SET NULL
    );""")

    c.execute("""
    CREATE TABLE IF NOT EXISTS activities(
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        type TEXT NOT NULL,
        description TEXT NOT NULL,
        entity_id INTEGER,
        performed_by TEXT DEFAULT '',
        metadata TEXT DEFAULT '',
        timestamp TEXT NOT NULL
    );""")

    c.execute("""
    CREATE TABLE IF NOT EXISTS audit_logs(
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        actor TEXT NOT NULL,
        action TEXT NOT NULL,
        resource TEXT NOT NULL,
        resource_id TEXT DEFAULT '',
        details TEXT DEFAULT '',
        company_id INTEGER,
        created_at TEXT NOT NULL
    );""")

    c.execute("""
    CREATE TABLE IF NOT EXISTS user_settings(
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        user_id TEXT NOT NULL,
        category TEXT NOT NULL,
        key TEXT NOT NULL,
        value TEXT NOT NULL,
        updated_at TEXT NOT NULL,
        UNIQUE(user_id, category, key)
    );""")

    conn.commit()


def _table_columns(conn: sqlite3.Connection, table: str) -> set[str]:
    return {str(r[1]) for r in conn.execute(f"PRAGMA table_info({table})")}


def _ensure_column(
    conn: sqlite3.Connection,
    table: str,
    col: str,
    col_def_sql: str,
    log_fn: Optional[Callable[[str, str], None]] = None,
) -> None:
    if col in _table_columns(conn, table):
        return
    conn.execute(f"ALTER TABLE {table} ADD COLUMN {col} {col_def_sql}")
    conn.commit()
    if log_fn:
        log_fn("Schema Migration", f"{table}: added column {col}")


def _ensure_index(
    conn: sqlite3.Connection,
    name: str,
    table: str,
    cols_sql: str,
) -> None:
    conn.execute(f"CREATE INDEX IF NOT EXISTS {name} ON {table} ({cols_sql})")
    conn.commit()


def migrate_schema(conn: sqlite3.Connection, log_fn: Optional[Callable[[str, str], None]] = None) -> None:
    # Eski DB'ler için kolon garantisi
    _ensure_column(conn, "employees", "user_id", "INTEGER", log_fn)
    _ensure_column(conn, "employees", "emergency_contact", "TEXT DEFAULT ''", log_fn)
    _ensure_column(conn, "leaves", "rejection_reason", "TEXT DEFAULT ''", log_fn)
    _ensure_column(conn, "leaves", "approved_at", "TEXT", log_fn)
    _ensure_column(conn, "documents", "sha256", "TEXT NOT NULL DEFAULT ''", log_fn)

    _ensure_index(conn, "idx_employees_company", "employees", "company_id, status")
    _ensure_index(conn, "idx_employees_department", "employees", "department_id")
    _ensure_index(conn, "idx_employees_email", "employees", "company_id, email")
    _ensure_index(conn, "idx_leaves_employee", "leaves", "employee_id, status")
    _ensure_index(conn, "idx_payroll_month", "payroll", "month")
    _ensure_index(conn, "idx_performance_employee", "performance", "employee_id")
    _ensure_index(conn, "idx_notifications_user", "notifications", "user_id, is_read")
    _ensure_index(conn, "idx_messages_to", "messages", "to_user_id")
    _ensure_index(conn, "idx_messages_from", "messages", "from_user_id")
    _ensure_index(conn, "idx_audit_company", "audit_logs", "company_id")


def seed_defaults(conn: sqlite3.Connection, log_fn: Optional[Callable[[str, str], None]] = None) -> None:
    """DB ilk kurulum: örnek şirketler."""
    from ..utils import now_iso
    from .sample_data import SAMPLE_COMPANIES

    n = int(conn.execute("SELECT COUNT(*) FROM companies").fetchone()[0])
    if n:
        return

    ts = now_iso()
    conn.executemany(
        """
        INSERT INTO companies(name, industry, address, phone, email, website, tax_number, description, created_at, updated_at)
        VALUES(?,?,?,?,?,?,?,?,?,?)
        """,
        [
            (
                c["name"],
                c["industry"],
                c["address"],
                c["phone"],
                c["email"],
                c["website"],
                c["tax_number"],
                c["description"],
                ts,
                ts,
            )
            for c in SAMPLE_COMPANIES
        ],
    )
    conn.commit()
    if log_fn:
        log_fn("Init", f"{len(SAMPLE_COMPANIES)} örnek şirket eklendi")
