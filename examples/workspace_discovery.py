"""Workspace root discovery from any subdirectory.

This example shows how to find the enclosing workspace root and use the
derived paths, regardless of where the script is run from.

The search walks upward from the current directory and stops at the first
directory holding a ".dvln" marker directory.
"""

from wkspc import Workspace


ws = Workspace.default()

# Cached after the first call; later calls do not touch the filesystem
root = ws.root()
if root is None:
    print("Not inside a workspace. Run 'wkspc init' first.")
else:
    print(f"Workspace root: {root}")
    print(f"Logs go to:     {ws.log_dir()}")
    print(f"Scratch space:  {ws.tmp_dir()}")
