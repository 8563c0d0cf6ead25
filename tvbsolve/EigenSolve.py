import numpy as np
from scipy.linalg import eig
from tvbsolve.utils import InstabilityWarning
import warnings

def repeated_eigenvalues(vals, accuracy=1.e-10):
    '''True if two eigenvalues are within sqrt(accuracy) of each other, relative to the largest one.'''
    vals = np.asarray(vals)
    if len(vals) < 2:
        return False
    gaps = np.abs(vals[:,np.newaxis] - vals[np.newaxis,:])
    np.fill_diagonal(gaps, np.inf)
    return bool(gaps.min() <= np.sqrt(accuracy)*max(np.abs(vals).max(), 1.))

def vanishing_set(X, accuracy=1.e-10, combination=None, seed=12399, verbose=False):
    '''
    Finds the common zeros from the multiplication matrices.

    The multiplication matrices commute, so the eigenvectors of the first one are
    eigenvectors of all of them. Coordinate k of the root that goes with the eigenvector
    e is (X[k] e)[0]/e[0].

    Parameters
    ----------
    X : numpy array
        X[k] is the multiplication matrix of x_k.
    accuracy : float
        If the first entry of an eigenvector is this small compared to its norm, the largest
        entry is used instead and an InstabilityWarning is issued.
    combination : array-like
        If given, the eigenvectors are those of sum(combination[k]*X[k]) instead of X[0].
        A random combination avoids trouble when two roots share a first coordinate.
        When it is not given and X[0] has repeated eigenvalues, a random combination
        is used anyway and an InstabilityWarning is issued.
    seed : int
        Seed of the random combination used when X[0] has repeated eigenvalues.
    verbose : bool
        Prints the eigenvalues and eigenvectors.

    Returns
    -------
    roots : numpy array
        Each row is a root.
    '''
    X = np.asarray(X)
    dim, size = X.shape[0], X.shape[1]
    if combination is None:
        vals, vecs = eig(X[0])
        if repeated_eigenvalues(vals, accuracy):
            #Eigenvectors of a repeated eigenvalue mix roots with the same first coordinate.
            combination = np.random.RandomState(seed).rand(dim)
            warnings.warn("The multiplication matrix of x_1 has repeated eigenvalues, roots are found from "
                          "the random combination {} instead. Pass combination= to choose it."
                          .format(combination), InstabilityWarning)
    if combination is not None:
        combination = np.asarray(combination, dtype=float)
        if combination.shape != (dim,):
            raise ValueError("Need one coefficient for each multiplication matrix")
        vals, vecs = eig(np.tensordot(combination, X, axes=1))
    if verbose:
        np.set_printoptions(suppress=True, linewidth=200)
        print('\nEigenvalues\n', vals)
        print('\nEigenvectors (as columns)\n', vecs)

    roots = np.zeros((size, dim), dtype=complex)
    for i in range(size):
        vec = vecs[:,i]
        spot = 0
        if np.abs(vec[0]) <= accuracy*np.linalg.norm(vec):
            spot = int(np.argmax(np.abs(vec)))
            warnings.warn("Eigenvector {} has first entry {:.3e}, entry {} is used to find the root instead"
                          .format(i, np.abs(vec[0]), spot), InstabilityWarning)
        for k in range(dim):
            if k == 0 and combination is None:
                roots[i,k] = vals[i]
            else:
                roots[i,k] = (X[k]@vec)[spot]/vec[spot]
    return roots

def residuals(roots, system):
    '''The absolute value of every polynomial at every root.

    Returns
    -------
    residuals : numpy array
        Entry (i,j) is |f_i(root_j)|.
    '''
    roots = np.asarray(roots)
    res = np.zeros((system.dim, len(roots)))
    for i, poly in enumerate(system.polys):
        for j, root in enumerate(roots):
            res[i,j] = np.abs(poly(root))
    return res

def check_solution(roots, system):
    '''The error of the roots, the sum over all the polynomials and roots of |f_i(root)|.'''
    return float(np.sum(residuals(roots, system)))
