import sys

from postdeck.bootstrap import PostDeckBootstrap
from postdeck.core.exceptions import PostDeckException


def _print_header(title: str):
    print("\n" + "=" * 70)
    print(title.center(70))
    print("=" * 70 + "\n")


def _print_error(title: str, message: str):
    print("\n" + "=" * 70)
    print(f"[ERROR] {title}".center(70))
    print("=" * 70)
    print(f"\n{message}\n")


def main():
    command = sys.argv[1].lower() if len(sys.argv) > 1 else "run"

    try:
        if command == "setup":
            _print_header("POSTDECK SETUP")
            PostDeckBootstrap(create_tables=True).initialize()
            print("Setup completed. Database tables have been created.\n")
        elif command == "run":
            _print_header("POSTDECK RUN MODE")
            bootstrap = PostDeckBootstrap()
            bootstrap.initialize()
            postdeck = bootstrap.create_postdeck()
            info = postdeck.get_info()
            print(f"Environment       : {info['app_env'].upper()}")
            print(f"Address           : {info['url']}")
            print(f"Workers           : {info['workers']}\n")
            postdeck.run(postdeck.app, app_import_string="postdeck.asgi:app")
        else:
            print(f"\nUnknown command: {command}")
            print("Available commands: setup, run\n")
            sys.exit(1)
    except KeyboardInterrupt:
        print("\n[INFO] Application interrupted by user\n")
        sys.exit(0)
    except PostDeckException as e:
        _print_error(e.error_code, e.error_message)
        sys.exit(1)


if __name__ == "__main__":
    main()
