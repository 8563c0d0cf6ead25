import numpy as np
from tvbsolve.MonomialOrder import gl_ordering, table_size
from tvbsolve.utils import InternalConsistencyError

def find_degree(degrees, verbose=False):
    '''Finds the appropriate degree for the Macaulay Matrix.

    This is d1*d2*...*dn - n + 1. When some of the degrees are 1 the product can
    be smaller than the sum, and then the Macaulay bound d1+...+dn - n + 1 is used
    so that every basis monomial times a variable still fits in the matrix.

    Parameters
    --------
    degrees: list
        The declared degrees of the polynomials.

    Returns
    -----------
    find_degree : int
        The degree of the Macaulay Matrix.

    '''
    dim = len(degrees)
    degree = max(int(np.prod(degrees)), int(np.sum(degrees))) - dim + 1
    if verbose:
        print('Degree of Macaulay Matrix:', degree)
    return degree

def matrix_shape(degrees, degree=None):
    '''The (rows, columns) of the Macaulay matrix for the given declared degrees.'''
    dim = len(degrees)
    if degree is None:
        degree = find_degree(degrees)
    rows = sum(table_size(dim, degree - d) for d in degrees)
    return rows, table_size(dim, degree)

def add_polys(degree, poly, poly_degree, matrix_terms):
    """Finds the rows a polynomial adds to a Macaulay Matrix.

    One row for each monomial multiple of poly of degree at most degree.

    Parameters
    ----------
    degree : int
        The degree of the Macaulay Matrix
    poly : Polynomial
        One of the polynomials used to make the matrix.
    poly_degree : int
        The declared degree of poly.
    matrix_terms : MonomialTable
        The monomials of the columns of the matrix.
    Returns
    -------
    rows : 2D numpy array
        The rows, in ascending order of the multiplying monomial. Has no rows
        when poly_degree is bigger than degree.
    """
    multipliers = gl_ordering(poly.dim, degree - poly_degree, ascending=True)
    rows = np.zeros((len(multipliers), len(matrix_terms)))
    for i, mon in enumerate(multipliers.terms):
        for coeff, exps in zip(poly.coeffs, poly.exponents):
            spot = matrix_terms.find(mon + exps)
            if spot == -1:
                raise InternalConsistencyError("Monomial {} of {} times a multiplier is not a column "
                                               "of the degree {} Macaulay matrix".format(tuple(mon + exps), poly, degree))
            rows[i, spot] = coeff
    return rows

def create_matrix(system, degree=None, verbose=False):
    ''' Builds a Macaulay matrix.

    Parameters
    ----------
    system : System
        The polynomials and their declared degrees.
    degree : int
        The degree of the Macaulay Matrix. Defaults to find_degree(system.degrees).
    verbose : bool
        Prints the matrix and its columns.
    Returns
    -------
    matrix : 2D numpy array
        The Macaulay matrix.
    matrix_terms : MonomialTable
        The i'th monomial is the one represented by the i'th column of the matrix.
        Monomials of the highest degree come first.
    '''
    if degree is None:
        degree = find_degree(system.degrees, verbose=verbose)
    matrix_terms = gl_ordering(system.dim, degree)

    flat_polys = list()
    for poly, poly_degree in zip(system.polys, system.degrees):
        flat_polys.append(add_polys(degree, poly, poly_degree, matrix_terms))
    matrix = np.vstack(flat_polys)
    if matrix.shape != matrix_shape(system.degrees, degree):
        raise InternalConsistencyError("Macaulay matrix has shape {}, expected {}"
                                       .format(matrix.shape, matrix_shape(system.degrees, degree)))

    if verbose:
        np.set_printoptions(suppress=False, linewidth=200)
        print('\nStarting Macaulay Matrix\n', matrix)
        print('\nColumns in Macaulay Matrix\n', matrix_terms.terms)
    return matrix, matrix_terms
