"""
History Module - in-memory list of scenarios per session
"""
from collections import OrderedDict, deque
from typing import Deque, Dict, List, Optional

from config import HISTORY_MAX_SCENARIOS, HISTORY_MAX_SESSIONS
from models import Difficulty, Scenario


class ScenarioHistory:
    """
    Keeps the most recent scenarios of each session, newest first.

    Both the scenarios per session and the number of sessions are bounded;
    the least recently used session is dropped when the cap is reached.
    """

    def __init__(self, max_scenarios: int = HISTORY_MAX_SCENARIOS, max_sessions: int = HISTORY_MAX_SESSIONS):
        self.max_scenarios = max_scenarios
        self.max_sessions = max_sessions
        self._sessions: "OrderedDict[str, Deque[Scenario]]" = OrderedDict()

    def add(self, session_id: str, scenario: Scenario) -> None:
        if session_id in self._sessions:
            self._sessions.move_to_end(session_id)
        else:
            self._sessions[session_id] = deque(maxlen=self.max_scenarios)
            while len(self._sessions) > self.max_sessions:
                self._sessions.popitem(last=False)
        self._sessions[session_id].appendleft(scenario)

    def list(self, session_id: str) -> List[Scenario]:
        return list(self._sessions.get(session_id, ()))

    def get(self, session_id: str, scenario_id: str) -> Optional[Scenario]:
        for scenario in self._sessions.get(session_id, ()):
            if scenario.id == scenario_id:
                return scenario
        return None

    def counts_by_difficulty(self, session_id: str) -> Dict[str, int]:
        scenarios = self._sessions.get(session_id, ())
        counts = {}
        for level in Difficulty:
            count = sum(1 for s in scenarios if s.difficulty == level)
            if count > 0:
                counts[level.value] = count
        return counts
