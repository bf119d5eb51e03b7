from .SelectivityEstimator import SelectivityEstimator
from selectivity.polyhist import config


class ConstantEstimator(SelectivityEstimator):
    """Fixed selectivities that ignore column statistics.

    The values are deliberately small so the planner keeps favouring an
    index scan when one is available.
    """

    def overlap_sel(self, column, const_lower, const_upper):
        return config.DEFAULT_AREA_SEL

    def overlap_join_sel(self, left, right):
        return config.DEFAULT_AREA_SEL

    def left_of_sel(self, column, const_value):
        return config.DEFAULT_POSITION_SEL

    def left_of_join_sel(self, left, right):
        return config.DEFAULT_POSITION_SEL

    def contains_sel(self, column, const_lower, const_upper):
        return config.DEFAULT_CONTAINMENT_SEL

    def contains_join_sel(self, left, right):
        return config.DEFAULT_CONTAINMENT_SEL
