"""Entry point for `python -m termsuggest`."""

from .client import main

main()
