# A collection of functions used by the stabilized normal form solver
import numpy as np
from scipy.special import comb

def memoize(function):
    cache = {}
    def decorated_function(*args):
        if args in cache:
            return cache[args]
        else:
            val = function(*args)
            cache[args] = val
            return val
    return decorated_function

class InstabilityWarning(Warning):
    pass

#The name used in the error taxonomy of the solver.
NumericInstabilityWarning = InstabilityWarning

class DegeneracyError(np.linalg.LinAlgError):
    """Raised when the reduction shows that the system is not generic.

    This happens when the highest degree block of the Macaulay matrix is not of
    full column rank, or when the rank of the remaining block is not the one
    predicted by Bezout's theorem.
    """
    pass

class InternalConsistencyError(RuntimeError):
    """Raised when a monomial that the degree bound guarantees to be in a
    monomial table is missing from it.
    """
    pass

@memoize
def get_var_list(dim):
    '''Returns a list of the variables [x_1, x_2, ..., x_n] as tuples.'''
    _vars = []
    var = [0]*dim
    for i in range(dim):
        var[i] = 1
        _vars.append(tuple(var))
        var[i] = 0
    return _vars

def num_mons_full(deg, dim):
    '''Returns the number of monomials of a certain dimension and less than or equal to a certian degree.

    Parameters
    ----------
    deg : int.
        The degree desired.
    dim : int
        The dimension desired.
    Returns
    -------
    num_mons_full : int
        The number of monomials of the given degree and dimension. 0 if deg is negative.
    '''
    if deg < 0:
        return 0
    return comb(deg+dim,dim,exact=True)

def sortRoots(roots, seed = 12399):
    """Sorts roots so they can be compared against other roots that were sorted the same way.
    Sorts by distance from a random hyperplane to avoid roots being too close according to the sort.
    """
    roots = np.asarray(roots)
    if len(roots) == 0:
        return roots
    dim = roots.shape[1]
    r = np.random.RandomState(seed).rand(dim)
    order = np.argsort((roots@r).real + np.pi*(roots@r).imag)
    return roots[order]

def match_roots(found, expected, tol = 1.e-6):
    """Checks that two collections of points agree up to a permutation.

    A test helper, roots come back in no particular order. Every expected point
    is matched with its closest remaining found point.

    Parameters
    ----------
    found : array-like
        Each row is a point.
    expected : array-like
        Each row is a point.
    tol : float
        How far apart matched points may be.

    Returns
    -------
    match_roots : bool
        True if there is a one to one matching within tol.
    """
    found = [np.asarray(p, dtype=complex) for p in found]
    expected = np.asarray(expected, dtype=complex)
    if len(found) != len(expected):
        return False
    for point in expected:
        dists = [np.linalg.norm(point - p) for p in found]
        spot = int(np.argmin(dists))
        if dists[spot] > tol:
            return False
        found.pop(spot)
    return True
