import numpy as np
from tvbsolve.polynomial import System
from tvbsolve.Macaulay import create_matrix, find_degree
from tvbsolve.TelenVanBarel import TelenVanBarel
from tvbsolve.Multiplication import multiplication_matrices, commutator_norms
from tvbsolve.EigenSolve import vanishing_set, check_solution
from tvbsolve.utils import InstabilityWarning, sortRoots
import warnings

def solve(polys, accuracy=1.e-10, fast_path=False, threshold=None, combination=None, verbose=False):
    '''
    Finds the common roots of a generic square system of polynomials.

    Parameters
    ----------
    polys : System or list of Polynomial objects
        The polynomials to find the common roots of. For a list, the degree of each
        polynomial is used as its declared degree.
    accuracy : float
        How small we want a number to be before assuming it is zero.
    fast_path : bool
        Use the two variable, equal degree optimization of the reduction.
    threshold : float
        Column count threshold for the fast path. Defaults to eta(d).
    combination : array-like
        Coefficients of the linear combination of multiplication matrices to diagonalize.
        Defaults to the multiplication matrix of x_1.
    verbose : bool
        Prints information about how the roots are computed.

    returns
    -------
    roots : numpy array
        The common roots of the polynomials. Each row is a root. The order only depends
        on the roots, see sortRoots.
    residual : float
        The sum of |f_i(root)| over every polynomial and root.
    '''
    if isinstance(polys, System):
        system = polys
    else:
        system = System(polys)

    degree = find_degree(system.degrees, verbose=verbose)
    matrix, matrix_terms = create_matrix(system, degree, verbose=verbose)
    if verbose:
        print('\nMacaulay Matrix shape:', matrix.shape)
        print('Expected number of roots:', system.bezout_number)

    N, matrix_terms, VB = TelenVanBarel(matrix, matrix_terms, system, accuracy=accuracy,
                                        fast_path=fast_path, threshold=threshold, verbose=verbose)
    X = multiplication_matrices(N, matrix_terms, VB, verbose=verbose)

    norms = commutator_norms(X)
    scale = max(max(np.linalg.norm(x) for x in X), 1.)
    if np.max(norms) > np.sqrt(accuracy)*scale**2:
        warnings.warn("The multiplication matrices do not commute (largest commutator norm {:.3e})"
                      .format(np.max(norms)), InstabilityWarning)
    if verbose:
        print('\nCommutator norms\n', norms)

    roots = sortRoots(vanishing_set(X, accuracy=accuracy, combination=combination, verbose=verbose))
    residual = check_solution(roots, system)
    if verbose:
        print('\nRoots\n', roots)
        print('\nResidual:', residual)
    return roots, residual
