#!/usr/bin/env python3
"""Pre-commit hook to prevent direct datetime.now() calls in production code.

Topic creation times and event object keys must come from an injected
TimeAuthorityProtocol so they can be pinned in tests. This script scans
topic_store/ for direct datetime.now() or datetime.utcnow() calls and
fails if any are found outside the system clock adapter.

Usage:
    python scripts/check_no_datetime_now.py

Exit codes:
    0: No violations found
    1: Violations found
"""

import re
import sys
from pathlib import Path

# Matches: datetime.now(), datetime.utcnow()
DATETIME_NOW_PATTERN = re.compile(r"datetime\s*\.\s*(now|utcnow)\s*\(", re.MULTILINE)

# The system clock adapter is the single source of wall-clock time
ALLOWED_FILES = {
    "topic_store/infrastructure/adapters/system_time_authority.py",
}


def check_file(file_path: Path) -> list[tuple[int, str]]:
    """Check a single file for datetime.now() violations.

    Returns:
        List of (line_number, line_content) tuples for violations.
    """
    violations: list[tuple[int, str]] = []

    try:
        content = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return violations

    for line_num, line in enumerate(content.splitlines(), start=1):
        if line.lstrip().startswith("#"):
            continue
        if DATETIME_NOW_PATTERN.search(line):
            violations.append((line_num, line.strip()))

    return violations


def find_violations(project_root: Path) -> dict[str, list[tuple[int, str]]]:
    """Scan the topic_store package under ``project_root``.

    Returns:
        Map of project-relative file path to its violations.
    """
    package_path = project_root / "topic_store"
    all_violations: dict[str, list[tuple[int, str]]] = {}
    if not package_path.exists():
        return all_violations

    for py_file in package_path.rglob("*.py"):
        relative_path = py_file.relative_to(project_root).as_posix()
        if relative_path in ALLOWED_FILES:
            continue
        violations = check_file(py_file)
        if violations:
            all_violations[relative_path] = violations

    return all_violations


def main() -> int:
    """Main entry point for the pre-commit hook."""
    all_violations = find_violations(Path(__file__).parent.parent)

    if not all_violations:
        print("No datetime.now() violations found in topic_store/")
        return 0

    print("Direct datetime.now() calls detected:")
    print()
    for file_path, violations in sorted(all_violations.items()):
        print(f"  {file_path}:")
        for line_num, line_content in violations:
            print(f"    Line {line_num}: {line_content}")
        print()

    print("How to fix:")
    print("  1. Inject TimeAuthorityProtocol in your service constructor")
    print("  2. Use self._time.utcnow() instead of datetime.now()")
    return 1


if __name__ == "__main__":
    sys.exit(main())
