#!/usr/bin/env python
"""Django's command-line utility. `runserver` with no address listens on 0.0.0.0:$PORT."""
import logging
import os
import sys

logger = logging.getLogger(__name__)


def main():
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'gps_backend.settings')
    import django
    from django.conf import settings
    from django.core.management import execute_from_command_line

    argv = list(sys.argv)
    if len(argv) == 2 and argv[1] == 'runserver':
        argv.append(f'0.0.0.0:{settings.PORT}')
        # configures LOGGING from settings before the first log line
        django.setup()
        logger.info(f"GPS simulation server listening on port {settings.PORT}")

    execute_from_command_line(argv)


if __name__ == '__main__':
    main()
