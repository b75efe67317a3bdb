#!/usr/bin/env python3
"""
Database migration runner for Supabase.

Connects directly to the Supabase PostgreSQL database and runs
SQL migration files from the migrations/ directory.

Usage:
    python run_migrations.py                    # Run pending migrations
    python run_migrations.py --status           # Show migration status
    python run_migrations.py --dry-run          # Show what would run
    python run_migrations.py --force 001        # Force re-run a migration

Configuration:
    Set SUPABASE_DB_URL in your .env file (Supabase Dashboard → Settings →
    Database → Connection string → URI).
"""

import argparse
import hashlib
import sys
from pathlib import Path
from typing import Optional

import psycopg2
from psycopg2 import sql
from rich.console import Console
from rich.table import Table

from shared.config import get_settings

console = Console()

MIGRATIONS_DIR = Path(__file__).parent / "migrations"
MIGRATIONS_TABLE = "_migrations"


def checksum_for(content: str) -> str:
    """Short content hash used to detect edited migrations."""
    return hashlib.sha256(content.encode()).hexdigest()[:16]


def find_migration_files(directory: Path = MIGRATIONS_DIR) -> list[Path]:
    """List migration files in the order they must run."""
    if not directory.exists():
        return []
    return sorted(directory.glob("*.sql"))


def match_migration(prefix: str, directory: Path = MIGRATIONS_DIR) -> Optional[Path]:
    """
    Find the single migration file starting with a prefix.

    Raises:
        ValueError: If more than one file matches
    """
    matches = sorted(directory.glob(f"{prefix}*.sql"))
    if len(matches) > 1:
        names = ", ".join(m.name for m in matches)
        raise ValueError(f"Multiple migrations match '{prefix}': {names}")
    return matches[0] if matches else None


def get_db_connection():
    """Get a connection to the Supabase PostgreSQL database."""
    settings = get_settings()

    if not settings.supabase_db_url:
        console.print("[red]Error:[/red] SUPABASE_DB_URL is not set.")
        console.print("Find it in Supabase Dashboard → Settings → Database → Connection string → URI")
        sys.exit(1)

    try:
        return psycopg2.connect(settings.supabase_db_url)
    except psycopg2.Error as e:
        console.print(f"[red]Database connection failed:[/red] {e}")
        sys.exit(1)


def ensure_migrations_table(conn):
    """Create the migrations tracking table if it doesn't exist."""
    with conn.cursor() as cur:
        cur.execute(
            sql.SQL("""
                CREATE TABLE IF NOT EXISTS {} (
                    id SERIAL PRIMARY KEY,
                    name VARCHAR(255) NOT NULL UNIQUE,
                    checksum VARCHAR(64) NOT NULL,
                    applied_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
                );
            """).format(sql.Identifier(MIGRATIONS_TABLE))
        )
        conn.commit()


def get_applied_migrations(conn) -> dict[str, dict]:
    """Get already applied migrations keyed by file name."""
    with conn.cursor() as cur:
        cur.execute(
            sql.SQL("SELECT name, checksum, applied_at FROM {} ORDER BY name;").format(
                sql.Identifier(MIGRATIONS_TABLE)
            )
        )
        return {
            row[0]: {"checksum": row[1], "applied_at": row[2]}
            for row in cur.fetchall()
        }


def get_pending_migrations(conn) -> list[tuple[str, Path, str]]:
    """Get migrations that have not been applied yet."""
    applied = get_applied_migrations(conn)
    pending = []

    for sql_file in find_migration_files(MIGRATIONS_DIR):
        name = sql_file.name
        checksum = checksum_for(sql_file.read_text())

        if name not in applied:
            pending.append((name, sql_file, checksum))
        elif applied[name]["checksum"] != checksum:
            console.print(f"[yellow]Warning:[/yellow] Migration {name} has changed since it was applied!")

    return pending


def run_migration(conn, name: str, sql_file: Path, checksum: str, dry_run: bool = False):
    """Run a single migration file and record it."""
    if dry_run:
        console.print(f"[cyan]Would run:[/cyan] {name}")
        return

    console.print(f"[blue]Running:[/blue] {name}...")

    try:
        with conn.cursor() as cur:
            cur.execute(sql_file.read_text())
            cur.execute(
                sql.SQL("INSERT INTO {} (name, checksum) VALUES (%s, %s)").format(
                    sql.Identifier(MIGRATIONS_TABLE)
                ),
                (name, checksum),
            )
        conn.commit()
        console.print(f"[green]✓[/green] {name} applied successfully")

    except psycopg2.Error as e:
        conn.rollback()
        console.print(f"[red]✗[/red] {name} failed: {e}")
        raise


def show_status(conn):
    """Show applied and pending migrations."""
    applied = get_applied_migrations(conn)
    pending = get_pending_migrations(conn)

    if not applied and not pending:
        console.print("[dim]No migrations found.[/dim]")
        return

    table = Table(title="Migration Status")
    table.add_column("Migration", style="cyan")
    table.add_column("Status", style="green")
    table.add_column("Applied At")
    table.add_column("Checksum")

    for name, info in applied.items():
        applied_at = info["applied_at"]
        table.add_row(
            name,
            "[green]Applied[/green]",
            applied_at.strftime("%Y-%m-%d %H:%M:%S") if applied_at else "",
            info["checksum"],
        )
    for name, _, checksum in pending:
        table.add_row(name, "[yellow]Pending[/yellow]", "", checksum)

    console.print(table)


def force_migration(conn, migration_prefix: str):
    """Force re-run a specific migration."""
    try:
        sql_file = match_migration(migration_prefix)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    if sql_file is None:
        console.print(f"[red]Error:[/red] No migration found matching '{migration_prefix}'")
        sys.exit(1)

    name = sql_file.name
    console.print(f"[yellow]Warning:[/yellow] Force re-running migration: {name}")

    if input("Continue? [y/N] ").lower() != "y":
        console.print("Aborted.")
        return

    with conn.cursor() as cur:
        cur.execute(
            sql.SQL("DELETE FROM {} WHERE name = %s").format(sql.Identifier(MIGRATIONS_TABLE)),
            (name,),
        )
    conn.commit()

    run_migration(conn, name, sql_file, checksum_for(sql_file.read_text()))


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Run database migrations for Supabase")
    parser.add_argument("--status", action="store_true", help="Show migration status")
    parser.add_argument("--dry-run", action="store_true", help="Show what would run")
    parser.add_argument("--force", metavar="PREFIX", help="Force re-run a migration by prefix")
    args = parser.parse_args()

    console.print("[bold]Startup Mentor Database Migrations[/bold]")
    console.print()

    conn = get_db_connection()
    ensure_migrations_table(conn)

    try:
        if args.status:
            show_status(conn)
        elif args.force:
            force_migration(conn, args.force)
        else:
            pending = get_pending_migrations(conn)
            if not pending:
                console.print("[green]All migrations are up to date![/green]")
                return

            console.print(f"Found {len(pending)} pending migration(s):")
            for name, _, _ in pending:
                console.print(f"  - {name}")
            console.print()

            for name, sql_file, checksum in pending:
                run_migration(conn, name, sql_file, checksum, dry_run=args.dry_run)
    finally:
        conn.close()


if __name__ == "__main__":
    main()
