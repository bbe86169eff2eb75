"""Build the site in the current directory."""

from sitegen.build_site import main

if __name__ == "__main__":
    raise SystemExit(main())
