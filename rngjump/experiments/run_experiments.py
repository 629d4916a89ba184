# rngjump/experiments/run_experiments.py
# Time jumpahead(n) against stepping n times, per generator and distance.
# Stepping is only timed up to --step_limit; jump-ahead is timed for every distance.

import argparse
import csv
import os
import time

from rngjump import GENERATORS

OUT_DIR = 'results'
FIELDS = ['generator', 'distance', 'trial', 'method', 'time_s']


def make_rng(name):
    cls = GENERATORS[name]
    return cls(*range(1, cls.SEED_COUNT + 1))


def time_jump(name, distance):
    rng = make_rng(name)
    t0 = time.perf_counter()
    rng.jumpahead(distance)
    elapsed = time.perf_counter() - t0
    return elapsed, rng.next_u32()


def time_step(name, distance):
    rng = make_rng(name)
    t0 = time.perf_counter()
    for _ in range(distance):
        rng.next_u32()
    elapsed = time.perf_counter() - t0
    return elapsed, rng.next_u32()


def run(generators, distances, trials, step_limit, writer):
    rows = 0
    for name in generators:
        for distance in distances:
            for trial in range(trials):
                jump_s, jump_out = time_jump(name, distance)
                writer.writerow([name, distance, trial, 'jump', f"{jump_s:.6f}"])
                rows += 1
                if distance <= step_limit:
                    step_s, step_out = time_step(name, distance)
                    if step_out != jump_out:
                        raise RuntimeError(f"{name}: jump and step disagree at distance {distance}")
                    writer.writerow([name, distance, trial, 'step', f"{step_s:.6f}"])
                    rows += 1
    return rows


def ensure_results_dir(out_dir=OUT_DIR):
    os.makedirs(out_dir, exist_ok=True)


def main(argv=None):
    parser = argparse.ArgumentParser()
    parser.add_argument('--generators', type=str, default=','.join(GENERATORS), help='comma list')
    parser.add_argument('--distances', type=str, default='10,1000,100000,10000000,1000000000000', help='comma list')
    parser.add_argument('--trials', type=int, default=3, help='repeats per combo')
    parser.add_argument('--step_limit', type=int, default=100000, help='largest distance to also step')
    parser.add_argument('--out_dir', type=str, default=OUT_DIR)
    args = parser.parse_args(argv)

    generators = [x.strip() for x in args.generators.split(',')]
    unknown = [g for g in generators if g not in GENERATORS]
    if unknown:
        raise SystemExit(f"unknown generators: {unknown}")
    distances = [int(x) for x in args.distances.split(',')]
    ensure_results_dir(args.out_dir)
    csv_path = os.path.join(args.out_dir, f'timing_{int(time.time())}.csv')
    with open(csv_path, 'w', newline='') as f:
        writer = csv.writer(f)
        writer.writerow(FIELDS)
        rows = run(generators, distances, args.trials, args.step_limit, writer)
    print(f"Experiments complete. {rows} rows saved at:", csv_path)
    return csv_path


if __name__ == '__main__':
    main()
