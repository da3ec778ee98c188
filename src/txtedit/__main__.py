from txtedit.adapters.terminal.app import main

if __name__ == "__main__":  # pragma: no cover - manual entry point
    raise SystemExit(main())
