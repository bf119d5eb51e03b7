import json
import logging
import time
from collections import defaultdict

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
import seaborn as sns

logger = logging.getLogger(__name__)


def true_overlap_sel(lowers, uppers, const_lower, const_upper):
    """Exact fraction of ranges overlapping [const_lower, const_upper]."""
    hits = (lowers <= const_upper) & (uppers >= const_lower)
    return float(np.mean(hits))


def true_left_of_sel(lowers, uppers, const_value):
    """Exact fraction of ranges lying strictly left of const_value."""
    return float(np.mean(uppers < const_value))


def true_overlap_join_sel(lowers1, uppers1, lowers2, uppers2):
    """Exact fraction of (r1, r2) pairs that overlap."""
    sorted_lowers2 = np.sort(lowers2)
    sorted_uppers2 = np.sort(uppers2)
    # r2 overlaps r1 iff lower2 <= upper1 and not upper2 < lower1
    starts_before_end = np.searchsorted(sorted_lowers2, uppers1, side='right')
    ends_before_start = np.searchsorted(sorted_uppers2, lowers1, side='left')
    matches = np.sum(starts_before_end - ends_before_start)
    return float(matches) / (len(lowers1) * len(lowers2))


def q_error(est_sel, true_sel):
    if true_sel == 0:
        return float('inf') if est_sel > 0 else 1.0
    if est_sel == 0:
        return float('inf')
    return max(est_sel / true_sel, true_sel / est_sel)


class QErrorBenchmark:
    """Benchmark for range selectivity estimators using the q-error metric"""

    def __init__(self, dataset, workload):
        self.dataset = dataset
        self.queries = self._load_queries(workload)
        self.estimators = []
        self.true_sel_cache = {}
        self.results = {}

    def _load_queries(self, workload):
        """Load the workload from a JSON file, or take a list of query dicts as is"""
        if isinstance(workload, str):
            with open(workload, 'r') as f:
                return json.load(f)
        return list(workload)

    def add_estimator(self, estimator):
        """Add a selectivity estimator to the benchmark"""
        self.estimators.append(estimator)

    def run_benchmark(self):
        """Run the benchmark for all estimators"""
        for estimator in self.estimators:
            self.results[estimator.name] = self._evaluate_estimator(estimator)

    def _ranges(self, column):
        lowers, uppers = self.dataset[tuple(column)]
        return np.asarray(lowers, dtype=float), np.asarray(uppers, dtype=float)

    def _get_true_selectivity(self, i, query):
        if i in self.true_sel_cache:
            return self.true_sel_cache[i]

        kind = query['kind']
        if kind == 'overlap':
            true_sel = true_overlap_sel(*self._ranges(query['column']), query['lower'], query['upper'])
        elif kind == 'left_of':
            true_sel = true_left_of_sel(*self._ranges(query['column']), query['value'])
        elif kind == 'overlap_join':
            true_sel = true_overlap_join_sel(*self._ranges(query['left']), *self._ranges(query['right']))
        else:
            raise ValueError(f"Unknown query kind: {kind}")

        self.true_sel_cache[i] = true_sel
        return true_sel

    def _estimate(self, estimator, query):
        kind = query['kind']
        if kind == 'overlap':
            return estimator.overlap_sel(tuple(query['column']), query['lower'], query['upper'])
        elif kind == 'left_of':
            return estimator.left_of_sel(tuple(query['column']), query['value'])
        elif kind == 'overlap_join':
            return estimator.overlap_join_sel(tuple(query['left']), tuple(query['right']))
        raise ValueError(f"Unknown query kind: {kind}")

    def _evaluate_estimator(self, estimator):
        """Evaluate a single estimator on all queries"""
        results = []

        for i, query in enumerate(self.queries):
            true_sel = self._get_true_selectivity(i, query)

            start_time = time.time()
            est_sel = self._estimate(estimator, query)
            end_time = time.time()

            err = q_error(est_sel, true_sel)
            logger.debug("[Benchmark] Query %d (%s) - True: %f, Est: %f, Q-Error: %f",
                         i, query['kind'], true_sel, est_sel, err)

            results.append({
                'query_id': i,
                'kind': query['kind'],
                'true_selectivity': true_sel,
                'estimated_selectivity': est_sel,
                'q_error': err,
                'execution_time': end_time - start_time,
            })

        return results

    def analyze_results(self):
        """Analyze the benchmark results"""
        if not self.results:
            logger.warning("No results available. Run the benchmark first.")
            return None

        analysis = {}

        for estimator_name, results in self.results.items():
            q_errors = [r['q_error'] for r in results]

            analysis[estimator_name] = {
                'median_q_error': np.median(q_errors),
                'mean_q_error': np.mean(q_errors),
                'max_q_error': np.max(q_errors),
                '90th_percentile': np.percentile(q_errors, 90),
                '95th_percentile': np.percentile(q_errors, 95),
                '99th_percentile': np.percentile(q_errors, 99),
                'mean_execution_time': np.mean([r['execution_time'] for r in results])
            }

        return analysis

    def analyze_by_kind(self):
        """Analyze results grouped by operator kind"""
        if not self.results:
            logger.warning("No results available. Run the benchmark first.")
            return None

        analysis = {}

        for estimator_name, results in self.results.items():
            by_kind = defaultdict(list)

            for r in results:
                by_kind[r['kind']].append(r['q_error'])

            analysis[estimator_name] = {
                kind: {
                    'median_q_error': np.median(q_errors),
                    'mean_q_error': np.mean(q_errors),
                    'count': len(q_errors)
                }
                for kind, q_errors in by_kind.items()
            }

        return analysis

    def plot_q_error_cdf(self, output_file=None):
        """Plot cumulative distribution function of q-errors"""
        plt.figure(figsize=(10, 6))

        for estimator_name, results in self.results.items():
            q_errors = sorted([r['q_error'] for r in results])
            y = np.linspace(0, 1, len(q_errors))
            plt.step(q_errors, y, label=estimator_name)

        plt.xscale('log')
        plt.xlabel('Q-Error')
        plt.ylabel('Cumulative Probability')
        plt.title('CDF of Q-Errors')
        plt.grid(True, alpha=0.3)
        plt.legend()

        if output_file:
            plt.savefig(output_file)
            plt.close()
        else:
            plt.show()

    def plot_q_error_by_kind(self, output_file=None):
        """Plot median q-errors grouped by operator kind"""
        analysis = self.analyze_by_kind()

        data = []
        for est, kinds in analysis.items():
            for kind, metrics in sorted(kinds.items()):
                data.append({
                    'Estimator': est,
                    'Operator': kind,
                    'Median Q-Error': metrics['median_q_error']
                })

        df = pd.DataFrame(data)

        plt.figure(figsize=(12, 6))
        sns.barplot(x='Operator', y='Median Q-Error', hue='Estimator', data=df)
        plt.yscale('log')
        plt.title('Median Q-Error by Operator')
        plt.grid(True, alpha=0.3)

        if output_file:
            plt.savefig(output_file)
            plt.close()
        else:
            plt.show()
        return df
