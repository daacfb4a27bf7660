"""Command-line entry point for the pool passport."""

from . import config
from . import args as args_module
from .catalog import load_locations
from .clock import LocaleClock
from .errors import StorageWriteError
from .maps import native_maps_url
from .session import PassportSession
from .storage import JsonFileStore


def build_session() -> PassportSession:
    """Create a session from the current config values."""
    catalog = load_locations(config.catalog_source)
    return PassportSession(
        catalog,
        JsonFileStore(config.state_path),
        clock=LocaleClock(config.timezone),
        page_size=config.page_size,
        timezone_from_location=config.timezone_from_location,
    )


def _confirm(prompt: str) -> bool:
    try:
        answer = input(f"{prompt} [y/N] ")
    except EOFError:
        return False
    return answer.strip().lower() in {"y", "yes"}


def run_command(session: PassportSession, args) -> int:
    command = args.command

    if command in ("status", "show"):
        view = session.project()
        print(view.list_summary())
        if command == "status":
            print(view.overview)
    elif command == "next":
        session.next()
        print(session.project().list_summary())
    elif command == "prev":
        session.previous()
        print(session.project().list_summary())
    elif command == "claim":
        result = session.claim(args.pool_id)
        if result is None:
            if args.pool_id:
                print(f"No pool with id '{args.pool_id}'.")
            else:
                print("No pools loaded.")
            return 1
        if result.newly_claimed:
            print(f"✨ Treasure Found! {result.location.name}")
        else:
            print(f"Treasure at {result.location.name} was already claimed on {result.record.claim_date.display}.")
        if result.newly_claimed and result.completed:
            print("🎉🏴‍☠️✨ ALL TREASURE FOUND! Captain Raymond is proud of you!")
        print(session.project().badge)
    elif command == "stamps":
        print(session.project().stamps_summary())
    elif command == "page-next":
        session.next_page()
        print(session.project().stamps_summary())
    elif command == "page-prev":
        session.previous_page()
        print(session.project().stamps_summary())
    elif command == "reset":
        if not args.yes and not _confirm("Reset all treasure on this device, First Mate?"):
            print("Reset cancelled.")
            return 0
        session.reset()
        print(f"All treasure reset. {session.project().badge}")
    elif command == "open-maps":
        location = session.selected_location()
        if location is None:
            print("No pools loaded.")
            return 1
        print(native_maps_url(location, "ios" if args.ios else ""))
    elif command == "gui":
        # Imported lazily so the CLI works without a display
        from .gui import PassportGUI
        PassportGUI(session).run()
    return 0


def main(argv=None) -> int:
    args = args_module.setup_config(argv)
    session = build_session()
    try:
        return run_command(session, args)
    except StorageWriteError as e:
        print(f"Warning: progress may not be saved this time ({e})")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
