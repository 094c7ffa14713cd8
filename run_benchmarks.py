#!/usr/bin/env python3
"""
Benchmark runner script for the append-only Merkle tree.

Thin wrapper around the ASV command line for the common scenarios.
"""

import argparse
import subprocess
import sys
from pathlib import Path


def run_command(cmd, description=""):
    """Run a command and handle errors."""
    print(f"\n🚀 {description}")
    print(f"Running: {' '.join(cmd)}")
    try:
        result = subprocess.run(cmd, check=True, capture_output=True, text=True)
        if result.stdout:
            print(result.stdout)
        return True
    except subprocess.CalledProcessError as e:
        print(f"❌ Error: {e}")
        if e.stderr:
            print(f"stderr: {e.stderr}")
        return False


def main():
    parser = argparse.ArgumentParser(
        description="Run benchmarks for the append-only Merkle tree",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_benchmarks.py --setup          # Initial setup
  python run_benchmarks.py --quick          # Quick development test
  python run_benchmarks.py --append         # Append benchmarks only
  python run_benchmarks.py --root           # Root lookup and single-append benchmarks
  python run_benchmarks.py --report         # Generate HTML report
        """
    )

    parser.add_argument('--setup', action='store_true',
                        help='Initialize ASV environment (run once)')
    parser.add_argument('--quick', action='store_true',
                        help='Run quick development benchmarks')
    parser.add_argument('--append', action='store_true',
                        help='Run append benchmarks only')
    parser.add_argument('--root', action='store_true',
                        help="Run root lookup and single-append benchmarks only")
    parser.add_argument('--locked', action='store_true',
                        help='Run synchronized handle benchmarks only')
    parser.add_argument('--report', action='store_true',
                        help='Generate HTML report from existing results')
    parser.add_argument('--show', action='store_true',
                        help='Show latest results in terminal')
    parser.add_argument('--verbose', action='store_true',
                        help='Verbose output')
    parser.add_argument('--machine', type=str,
                        help='Specify machine name for results')

    args = parser.parse_args()

    if not Path('asv.conf.json').exists():
        print("❌ Error: asv.conf.json not found. Please run from project root.")
        return 1

    if args.setup:
        if not run_command(['asv', 'machine', '--yes'], "Configuring ASV machine info"):
            return 1
        print("✅ ASV setup complete!")
        return 0

    if args.report:
        if run_command(['asv', 'publish'], "Publishing results"):
            run_command(['asv', 'preview'], "Opening report in browser")
        return 0

    if args.show:
        run_command(['asv', 'show'], "Showing latest results")
        return 0

    base_cmd = ['asv', 'run']
    if args.machine:
        base_cmd.extend(['--machine', args.machine])
    if args.verbose:
        base_cmd.append('--verbose')

    patterns = []
    if args.quick:
        patterns.append('--quick')
    if args.append:
        patterns.extend(['-b', 'MerkleAppendBenchmarks'])
    if args.root:
        patterns.extend(['-b', 'MerkleRootBenchmarks|MerkleSingleAppendBenchmarks'])
    if args.locked:
        patterns.extend(['-b', 'SynchronizedAppendBenchmarks'])

    description = f"Targeted benchmarks: {' '.join(patterns)}" if patterns else "All benchmarks"

    if not run_command(base_cmd + patterns, description):
        print("\n❌ Benchmarks failed!")
        return 1

    print("\n✅ Benchmarks completed successfully!")
    print("  • View results: python run_benchmarks.py --show")
    print("  • Generate report: python run_benchmarks.py --report")
    return 0


if __name__ == '__main__':
    sys.exit(main())
