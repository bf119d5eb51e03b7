import logging
import math
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class SelectivityEstimator(ABC):
    """Abstract base class for range operator selectivity estimators.

    Restriction methods estimate the fraction of a column's rows that satisfy
    `column OP constant`; join methods estimate the fraction of row pairs
    satisfying `column1 OP column2`. Columns are identified by (table, column).
    """

    def __init__(self):
        # Extract the concrete class name automatically
        self.name = self.__class__.__name__
        logger.info("Initialized Estimator: %s", self.name)

    @abstractmethod
    def overlap_sel(self, column, const_lower, const_upper):
        """Selectivity of `column && [const_lower, const_upper]`."""
        pass

    @abstractmethod
    def overlap_join_sel(self, left, right):
        """Selectivity of `left && right`."""
        pass

    @abstractmethod
    def left_of_sel(self, column, const_value):
        """Selectivity of `column << const_value`."""
        pass

    @abstractmethod
    def left_of_join_sel(self, left, right):
        """Selectivity of `left << right`."""
        pass

    @abstractmethod
    def contains_sel(self, column, const_lower, const_upper):
        """Selectivity of `column @> [const_lower, const_upper]`."""
        pass

    @abstractmethod
    def contains_join_sel(self, left, right):
        """Selectivity of `left @> right`."""
        pass

    @staticmethod
    def clamp(selectivity, fallback):
        """Clamps an estimate into [0, 1]; NaN becomes the fallback."""
        if math.isnan(selectivity):
            return fallback
        return min(1.0, max(0.0, selectivity))
