#!/usr/bin/env python
# -*- coding: utf-8 -*-

"render - Plots of metrics logs"

import matplotlib
matplotlib.use('Agg')
from matplotlib import pylab as plt  # noqa: E402

from .sink import read_records  # noqa: E402

DPI = 96
WIDTH = 800
HEIGHT = 600


def plot_records(log_path, image_path=None, dpi=DPI):
    """Plots mean usage and mean wait against the number of completed jobs.

    Parameters
    ----------
        log_path : str
            The metrics log to read
        image_path : Optional[str]
            Where to save the figure. When omitted, the figure is returned
            without being saved.
    """
    records = read_records(log_path)
    fig, (ax_usage, ax_wait) = plt.subplots(
        2, 1, sharex=True, figsize=(WIDTH / dpi, HEIGHT / dpi), dpi=dpi
    )
    ax_usage.plot(records[:, 0], records[:, 1])
    ax_usage.set_ylabel('Mean resource usage (%)')
    ax_usage.grid()
    ax_wait.plot(records[:, 0], records[:, 2])
    ax_wait.set_ylabel('Mean wait (ticks)')
    ax_wait.set_xlabel('Completed jobs')
    ax_wait.grid()
    fig.suptitle(str(log_path))
    fig.tight_layout()

    if image_path is not None:
        fig.savefig(image_path)
        plt.close(fig)
    return fig
