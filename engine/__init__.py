# engine/__init__.py

# Expose the simulator (for the callbacks file)
from .simulator import GoalSimulator, run_goal_simulation

# Latest-wins wrapper used by the Dash callbacks
from .dispatcher import LatestResultDispatcher, STALE
