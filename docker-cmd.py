"""Start script used inside the container CMD."""

from bang_redirect.server import main

if __name__ == "__main__":
    main()
