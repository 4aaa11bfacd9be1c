#!/usr/bin/env python
"""
Command-line entry point for the referral service.

Sets ``referral.settings`` as the default settings module and hands over
to Django's management utility (``migrate``, ``runserver``,
``seed_doctors`` and friends).
"""
import os
import sys


def main() -> None:
    """Run administrative tasks for the referral project."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'referral.settings')
    try:
        from django.core.management import execute_from_command_line  # type: ignore
    except ImportError as exc:
        raise ImportError(
            "Couldn't import Django. Is it installed and available on your "
            "PYTHONPATH environment variable?"
        ) from exc
    execute_from_command_line(sys.argv)


if __name__ == '__main__':
    main()
