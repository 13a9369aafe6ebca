#!/usr/bin/env python3
from __future__ import annotations

import sys

from workbench.lint import check_manifests
from workbench.settings import get_settings


def main() -> int:
    errors = check_manifests(get_settings().modules_path)
    if errors:
        print("Module sanity check failed:\n")
        for issue in errors:
            print(f"- {issue}")
        return 1

    print("Module sanity check passed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
