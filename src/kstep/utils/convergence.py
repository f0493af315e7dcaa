"""
Convergence criteria for the K-Means engine.

The engine treats an iteration in which no point changes cluster as
converged. There is no tolerance on centroid movement and no iteration cap
here; a cap, if wanted, belongs to whatever drives the engine.
"""

from typing import Dict, Any, Optional
from torch import Tensor

from ..base.interfaces import ConvergenceCriterion


class NoAssignmentChange(ConvergenceCriterion):
    """Converged when an assignment phase leaves every label unchanged."""

    def count_changes(self, previous: Tensor, current: Tensor) -> int:
        """Number of points whose label differs between two assignments."""
        return int((current != previous).sum().item())

    def check(self, current_state: Dict[str, Any]) -> bool:
        """Check whether the latest assignment changed anything.

        Args:
            current_state: Must contain 'previous_labels' and 'labels';
                'iteration' is recorded in the history when present.
        """
        n_changed = self.count_changes(current_state['previous_labels'],
                                       current_state['labels'])
        n_total = len(current_state['labels'])

        self.history.append({
            'iteration': current_state.get('iteration', len(self.history)),
            'n_changed': n_changed,
            'change_fraction': n_changed / n_total if n_total else 0.0
        })

        return n_changed == 0

    def last_change_count(self) -> Optional[int]:
        if not self.history:
            return None
        return self.history[-1]['n_changed']
