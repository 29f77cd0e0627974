#!/usr/bin/env python3
"""
Create, fetch or delete a provisioned resource directly against DATABASE_URL.

Usage:
  python scripts/provision.py create accounts --mobile 9848149507 --name "John Doe" --email john.doe@example.com
  python scripts/provision.py create cards --mobile 9848149507
  python scripts/provision.py fetch loans --mobile 9848149507
  python scripts/provision.py delete cards --mobile 9848149507
"""
from __future__ import annotations

import argparse
import json
import sys

from provisioning.core.config import get_settings
from provisioning.core.logging_config import setup_logging
from provisioning.db.create_tables import create_all
from provisioning.domain.identifiers import is_valid_mobile_number
from provisioning.domain.kinds import KINDS, get_kind
from provisioning.services.provisioning_service import ProvisioningService


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Provision accounts, cards and loans")
    ap.add_argument("action", choices=["create", "fetch", "delete"])
    ap.add_argument("kind", choices=sorted(KINDS))
    ap.add_argument("--mobile", required=True, help="Mobile number (10 digits, starting with 6-9)")
    ap.add_argument("--name", help="Customer name (accounts only)")
    ap.add_argument("--email", help="Customer e-mail (accounts only)")
    return ap


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file or None)
    if settings.auto_create_schema:
        create_all()

    mobile = (args.mobile or "").strip()
    if not is_valid_mobile_number(mobile):
        raise SystemExit("Invalid mobile number (10 digits, starting with 6-9)")
    kind = get_kind(args.kind)
    svc = ProvisioningService(kind)

    if args.action == "create":
        owner = None
        if kind.owner_linked:
            if not args.name or not args.email:
                raise SystemExit("--name and --email are required to open an account")
            owner = {"name": args.name.strip(), "email": args.email.strip()}
        svc.create(mobile, owner)
        print(f"OK: {kind.label.lower()} created for {mobile}")
    elif args.action == "fetch":
        print(json.dumps(svc.fetch(mobile), indent=2, default=str))
    else:
        svc.delete(mobile)
        print(f"OK: {kind.label.lower()} deleted for {mobile}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
