import numpy as np
from tvbsolve.utils import InternalConsistencyError, get_var_list

def multiplication_matrices(N, matrix_terms, VB, verbose=False):
    '''
    Builds the matrix of multiplication by each variable on the vector basis.

    Parameters
    ----------
    N : numpy array
        The normal forms, row i belongs to the i'th monomial of matrix_terms.
    matrix_terms : MonomialTable
        The monomials that have normal forms.
    VB : MonomialTable
        The vector basis.
    verbose : bool
        Prints the matrices.

    Returns
    -------
    X : numpy array
        X[k] is the multiplication matrix of x_k. Its i'th column is the normal form of
        x_k times the i'th basis monomial.
    '''
    dim = VB.dim
    X = np.zeros((dim, len(VB), len(VB)), dtype=N.dtype)
    basis = VB.terms
    for k, var in enumerate(get_var_list(dim)):
        for i, mon in enumerate(basis):
            spot = matrix_terms.find(mon + var)
            if spot == -1:
                raise InternalConsistencyError("x_{} times basis monomial {} is not in the Macaulay matrix, "
                                               "its degree is too small".format(k+1, tuple(mon)))
            X[k][:,i] = N[spot]
    if verbose:
        np.set_printoptions(suppress=True, linewidth=200)
        for k in range(dim):
            print('\nMultiplication matrix of x_{}\n'.format(k+1), X[k])
    return X

def commutator_norms(X):
    '''The Frobenius norms of X[i]X[j] - X[j]X[i] for every pair of multiplication matrices.

    These are all 0 in exact arithmetic for a generic system.
    '''
    dim = X.shape[0]
    norms = np.zeros((dim, dim))
    for i in range(dim):
        for j in range(i+1, dim):
            norms[i,j] = norms[j,i] = np.linalg.norm(X[i]@X[j] - X[j]@X[i])
    return norms
