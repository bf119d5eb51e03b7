import logging
import os
import pickle

from selectivity.polyhist import config

logger = logging.getLogger(__name__)


class HistogramCatalog:
    """Range histograms keyed by (table, column)."""

    def __init__(self, histograms=None):
        self.histograms = dict(histograms or {})

    def get(self, table, column):
        return self.histograms.get((table, column))

    def set(self, table, column, histogram):
        self.histograms[(table, column)] = histogram

    def get_all(self):
        return self.histograms

    def __len__(self):
        return len(self.histograms)

    def save_to_file(self, path=None):
        path = path or config.STATS_FILE
        dir_path = os.path.dirname(path)
        if dir_path and not os.path.exists(dir_path):
            os.makedirs(dir_path)
        with open(path, "wb") as f:
            pickle.dump({"histograms": self.histograms}, f)
        logger.info("Saved %d histograms to %s", len(self.histograms), path)

    @classmethod
    def load_from_file(cls, path=None):
        path = path or config.STATS_FILE
        with open(path, "rb") as f:
            data = pickle.load(f)
        logger.info("Loaded %d histograms from %s", len(data["histograms"]), path)
        return cls(data["histograms"])
