"""Default display settings per invocation name."""

# Registry of personalities; any other name lists bare paths
PROFILES: dict[str, dict[str, bool]] = {
    "ls": {"show_size": True, "show_symlink": True},
    "lsr": {"recursive": True, "show_size": True, "show_symlink": True},
    "lt": {"show_time": True},
    "lr": {"recursive": True},
    "ll": {"show_symlink": True, "show_mode": True, "show_owner": True, "show_size": True},
    "llr": {
        "recursive": True,
        "show_symlink": True,
        "show_mode": True,
        "show_owner": True,
        "show_size": True,
    },
}
