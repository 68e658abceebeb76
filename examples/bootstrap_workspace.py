"""Bootstrap a workspace and handle partial failures.

set_root() creates the metadata layout step by step. If a step fails the
error names it and the recovery_hint explains that re-running is safe.
"""

import sys
from pathlib import Path

from wkspc import BootstrapError, WkspcError, Workspace


target = Path(sys.argv[1]) if len(sys.argv) > 1 else Path.cwd()
ws = Workspace.default()

# Pattern 1: inspect each step without raising
result = ws.bootstrap(target)
for outcome in result.completed:
    state = "created" if outcome.created else "ok"
    print(f"{state:>7}  {outcome.path}")

# Pattern 2: raise on failure and report the hint
try:
    ctx = ws.set_root(target)
except BootstrapError as e:
    print(f"Step '{e.step}' failed: {e}")
    print(f"Hint: {e.recovery_hint}")
    raise SystemExit(1) from None
except WkspcError as e:
    print(f"Error: {e}")
    raise SystemExit(1) from None

print(f"Database placeholder: {ctx.db_file}")

# Pattern 3: leave the workspace (clears cached paths, keeps files)
ws.set_root("")
