import numpy as np
import matplotlib.pyplot as plt


def plotHistory(history, ax=None):
    '''Semilog plot of ||x_k - x_{k-1}|| against the iteration number.'''
    if ax is None:
        fig = plt.figure()
        ax = fig.add_subplot(1,1,1)
    else:
        fig = ax.figure

    h = np.asarray(history, dtype=float)
    k = np.arange(1, h.size+1)
    mask = h > 0.0 # Exactly repeated iterates cannot go on a log axis
    ax.semilogy(k[mask], h[mask], '.-')
    ax.set_xlabel('Iteration k')
    ax.set_ylabel('||x_k - x_{k-1}||')
    ax.set_title('Simple iteration convergence')
    return fig
