"""Recognized flags and the display fields each one updates."""

FLAG_PREFIX = "-"

FLAGS: dict[str, dict[str, bool]] = {
    "-r": {"recursive": True},
    "-m": {"show_mode": True},
    "-o": {"show_owner": True},
    "-s": {"show_size": True},
    "-t": {"show_time": True},
    "-c": {"show_cid": True},
    "-l": {"show_symlink": True, "show_mode": True, "show_size": True},
    # name only; recursion is not a display field and is kept
    "-1": {
        "show_symlink": False,
        "show_mode": False,
        "show_owner": False,
        "show_size": False,
        "show_time": False,
        "show_cid": False,
    },
}
