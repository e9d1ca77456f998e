"""Entry point for PyInstaller executable.

A frozen build scans its own folder and reads its flags from its file
name, so copying "folder-m3u--R+--A+.exe" into a music folder and
double-clicking it writes a recursive, alphabetical playlist there.
"""
import sys
from pathlib import Path

if __name__ == "__main__":
    from folder_m3u.cli import main

    if getattr(sys, "frozen", False):
        exe = Path(sys.executable)
        sys.exit(main([str(exe.parent), *sys.argv[1:]], program_name=exe.name))
    sys.exit(main())
