"""
Experiment script tests: timing CSV and plotting.
"""

import csv
import io

import pandas as pd
import pytest

from rngjump.experiments import plot_timing, run_experiments


class TestRunExperiments:
    """Tests for the timing runner."""

    def test_jump_and_step_agree(self):
        """Test that both timing paths land on the same output."""
        for name in ('cong', 'kiss', 'lfsr113'):
            _, jump_out = run_experiments.time_jump(name, 500)
            _, step_out = run_experiments.time_step(name, 500)
            assert jump_out == step_out

    def test_run_writes_rows(self):
        """Test that stepping is only timed up to the step limit."""
        buf = io.StringIO()
        writer = csv.writer(buf)
        rows = run_experiments.run(['shr3', 'mwc64'], [10, 10 ** 9], 2, 100, writer)
        # per generator: 2 trials x (jump + step at 10, jump only at 10**9)
        assert rows == 2 * 2 * 3
        lines = list(csv.reader(io.StringIO(buf.getvalue())))
        assert {line[3] for line in lines} == {'jump', 'step'}
        assert all(line[3] == 'jump' for line in lines if line[1] == str(10 ** 9))

    def test_main_writes_csv(self, tmp_path):
        """Test the command line run writing a CSV under --out_dir."""
        csv_path = run_experiments.main([
            '--generators', 'cong', '--distances', '5,50', '--trials', '1',
            '--step_limit', '50', '--out_dir', str(tmp_path),
        ])
        df = pd.read_csv(csv_path)
        assert list(df.columns) == run_experiments.FIELDS
        assert len(df) == 4

    def test_main_rejects_unknown_generator(self, tmp_path):
        """Test that unknown generator names stop the run."""
        with pytest.raises(SystemExit):
            run_experiments.main(['--generators', 'mt19937', '--out_dir', str(tmp_path)])


class TestPlotTiming:
    """Tests for the plotting script."""

    @pytest.fixture
    def timing_df(self):
        return pd.DataFrame({
            'generator': ['kiss'] * 6,
            'distance': [10, 10, 1000, 1000, 10, 1000],
            'trial': [0, 1, 0, 1, 0, 0],
            'method': ['jump', 'jump', 'jump', 'jump', 'step', 'step'],
            'time_s': [0.001, 0.003, 0.002, 0.004, 0.01, 1.0],
        })

    def test_prepare_pivot(self, timing_df):
        """Test mean times per (generator, method) and distance."""
        pivot = plot_timing.prepare_pivot(timing_df)
        assert list(pivot.columns) == [10, 1000]
        assert pivot.loc[('kiss', 'jump'), 10] == pytest.approx(0.002)
        assert pivot.loc[('kiss', 'jump'), 1000] == pytest.approx(0.003)
        assert pivot.loc[('kiss', 'step'), 1000] == pytest.approx(1.0)

    def test_plot_saves_file(self, timing_df, tmp_path):
        """Test that the plot is written without opening a window."""
        out = tmp_path / 'plots' / 'timing.png'
        pivot = plot_timing.prepare_pivot(timing_df)
        fig = plot_timing.plot_timing(pivot, out_file=str(out), show=False)
        assert out.exists()
        assert len(fig.axes[0].lines) == 2

    def test_load_csv_requires_columns(self, tmp_path):
        """Test that CSVs missing columns are rejected."""
        path = tmp_path / 'bad.csv'
        path.write_text('generator,distance\nkiss,10\n')
        with pytest.raises(SystemExit):
            plot_timing.load_csv(str(path))
