import sys

from bookstore.main import run

sys.exit(run())
