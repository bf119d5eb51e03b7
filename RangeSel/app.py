import logging

import numpy as np
from benchmark import QErrorBenchmark
from selectivity.ConstantEstimator import ConstantEstimator
from selectivity.polyhist.main_estimator import PolyHistEstimator
from selectivity.polyhist.stats_builder import StatsBuilder
from selectivity.polyhist import config


def generate_dataset(rng, num_rows=5000):
    """Synthetic range columns: (lowers, uppers) arrays keyed by (table, column)"""
    dataset = {}

    # Reservations clustered around the middle of the year
    starts = np.clip(rng.normal(180, 50, num_rows), 0, 365)
    dataset[('reservations', 'during')] = (starts, starts + rng.integers(1, 14, num_rows))

    # Maintenance windows spread evenly over the second half
    starts = rng.uniform(150, 350, num_rows)
    dataset[('maintenance', 'window')] = (starts, starts + rng.uniform(0.5, 5, num_rows))

    # Price bands skewed towards cheap items
    starts = rng.exponential(40, num_rows)
    dataset[('products', 'price_band')] = (starts, starts + rng.uniform(1, 20, num_rows))
    return dataset


def generate_workload(rng, dataset, num_queries=60):
    """Random overlap, left-of and overlap-join queries over the dataset"""
    columns = list(dataset.keys())
    queries = []
    for _ in range(num_queries):
        kind = rng.choice(['overlap', 'left_of', 'overlap_join'])
        column = columns[rng.integers(len(columns))]
        lowers, uppers = dataset[column]
        lo, hi = float(lowers.min()), float(uppers.max())
        if kind == 'overlap':
            a, b = sorted(rng.uniform(lo, hi, 2))
            queries.append({'kind': kind, 'column': list(column), 'lower': a, 'upper': b})
        elif kind == 'left_of':
            queries.append({'kind': kind, 'column': list(column), 'value': float(rng.uniform(lo, hi))})
        else:
            other = columns[rng.integers(len(columns))]
            queries.append({'kind': kind, 'left': list(column), 'right': list(other)})
    return queries


def main():
    """Main function to run the benchmark"""
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    rng = np.random.default_rng(42)

    dataset = generate_dataset(rng)
    workload = generate_workload(rng, dataset)

    # Build statistics once and keep them around for later runs
    catalog = StatsBuilder(num_bins=config.DEFAULT_NUM_BINS).build_all(dataset)
    catalog.save_to_file()

    # Create the benchmark
    benchmark = QErrorBenchmark(dataset, workload)
    benchmark.add_estimator(ConstantEstimator())
    benchmark.add_estimator(PolyHistEstimator(catalog))
    benchmark.run_benchmark()

    # Analyze the results
    analysis = benchmark.analyze_results()
    print("Overall Analysis:")
    for estimator, metrics in analysis.items():
        print(f"\n{estimator}:")
        for metric, value in metrics.items():
            print(f"  {metric}: {value}")

    analysis_by_kind = benchmark.analyze_by_kind()
    print("\nAnalysis by Operator:")
    for estimator, kind_metrics in analysis_by_kind.items():
        print(f"\n{estimator}:")
        for kind, metrics in sorted(kind_metrics.items()):
            print(f"  {kind} (count: {metrics['count']}):")
            print(f"    Median Q-Error: {metrics['median_q_error']}")
            print(f"    Mean Q-Error: {metrics['mean_q_error']}")

    # Plot results
    benchmark.plot_q_error_cdf("q_error_cdf.png")
    benchmark.plot_q_error_by_kind("q_error_by_operator.png")


if __name__ == "__main__":
    main()
