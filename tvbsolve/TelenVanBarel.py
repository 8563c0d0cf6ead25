import numpy as np
from scipy.linalg import qr, solve_triangular
from tvbsolve.utils import DegeneracyError

def highest_cut(matrix_terms, degree):
    '''The number of leading columns of the matrix whose monomials have the given degree.'''
    degrees = matrix_terms.degrees
    cut = 0
    while cut < len(degrees) and degrees[cut] == degree:
        cut += 1
    return cut

def rrqr_reduceTelenVanBarel(matrix, matrix_terms, cut, number_of_roots, accuracy = 1.e-10):
    ''' Reduces a Macaulay matrix, Telen Van Barel style.

    The matrix is split into the shape
    A B
    D E
    Where A and D hold the first cut columns (the highest degree monomials). First A and D are
    reduced using QR without pivoting, and then the rest of the matrix is multiplied by Q.T to change
    it accordingly. Then E is reduced by QR with pivoting, the columns of B and the monomials of E are
    permuted accordingly. The columns pivoted to the end of E are the vector basis of the quotient.
    The matrix passed in is not changed.

    Parameters
    ----------
    matrix : numpy array.
        The Macaulay matrix.
    matrix_terms: MonomialTable
        The i'th monomial is the one represented by the i'th column in the matrix.
    cut : int
        The number of leading columns that are not allowed in the basis.
    number_of_roots : int
        The size of the vector basis, the Bezout number of the system.
    accuracy : float
        Diagonal entries of R smaller than this, relative to the largest entry of the matrix,
        are taken to be 0.
    Returns
    -------
    matrix : numpy array
        The reduced matrix. It has one row for each column not in the basis, and is upper triangular
        in those columns.
    matrix_terms: MonomialTable
        The resorted monomials. The last number_of_roots of them are the basis.
    '''
    matrix = np.array(matrix, dtype=float)
    rows, cols = matrix.shape
    height = cols - number_of_roots
    if height < cut:
        raise DegeneracyError("The basis can not have {} monomials when only {} are below the highest degree"
                              .format(number_of_roots, cols - cut))
    if rows < height:
        raise DegeneracyError("The Macaulay matrix has {} rows but needs rank {}".format(rows, height))
    tol = accuracy*max(np.abs(matrix).max(), 1.)

    if cut > 0:
        #QR reduces A and D without pivoting.
        Q1,R1 = qr(matrix[:,:cut])
        if np.any(np.abs(np.diag(R1)) <= tol):
            raise DegeneracyError("The highest degree block is not full rank, the system has roots at infinity")
        #Multiplying the rest of the matrix by Q.T
        matrix[:,cut:] = Q1.T@matrix[:,cut:]
        matrix[:,:cut] = R1

    P = np.arange(cols - cut)
    if rows > cut:
        #RRQR reduces E.
        Q,R,P = qr(matrix[cut:,cut:], pivoting = True)
        diag = np.abs(np.diag(R))
        needed = height - cut
        if needed > 0 and (len(diag) < needed or diag[needed-1] <= tol):
            raise DegeneracyError("The Macaulay matrix has rank less than {}, the system is not generic".format(height))
        if len(diag) > needed and diag[needed] > tol:
            raise DegeneracyError("The Macaulay matrix has rank more than {}, the system has fewer than "
                                  "{} roots".format(height, number_of_roots))
        matrix[cut:,cut:] = R
        matrix[cut:,:cut] = 0
        #Shifts the columns of B
        matrix[:cut,cut:] = matrix[:cut,cut:][:,P]
    elif height > cut:
        raise DegeneracyError("The Macaulay matrix has rank less than {}, the system is not generic".format(height))

    matrix_terms = matrix_terms[:cut].concatenate(matrix_terms[cut:].permuted(P))
    return matrix[:height], matrix_terms

def normal_forms(matrix, number_of_roots):
    '''Back substitutes the reduced matrix to get the normal forms.

    Parameters
    ----------
    matrix : numpy array
        The output of rrqr_reduceTelenVanBarel.
    number_of_roots : int
        The size of the vector basis.

    Returns
    -------
    normal_forms : numpy array
        Row i holds the coefficients of the i'th monomial written in the vector basis.
        The last number_of_roots rows are the identity.
    '''
    height = matrix.shape[0]
    N = -solve_triangular(matrix[:,:height], matrix[:,height:])
    return np.vstack((N, np.eye(number_of_roots)))

def eta(d):
    '''Column count threshold for the two variable fast path.

    Columns of a two variable, equal degree d Macaulay matrix with at least this
    many nonzero entries are kept out of the vector basis.
    '''
    return d**2/3 + 3*d + 90

def fast_path_columns(matrix, matrix_terms, degree, threshold):
    '''Finds the column order used by the two variable fast path.

    Returns
    -------
    order : numpy array
        The highest degree columns, then the other columns with at least threshold
        nonzero entries, then everything else.
    cut : int
        How many columns come before everything else.
    '''
    cut = highest_cut(matrix_terms, degree)
    counts = np.count_nonzero(matrix, axis=0)
    rest = np.arange(cut, matrix.shape[1])
    dense = rest[counts[cut:] >= threshold]
    sparse = rest[counts[cut:] < threshold]
    order = np.concatenate((np.arange(cut), dense, sparse)).astype(int)
    return order, cut + len(dense)

def TelenVanBarel(matrix, matrix_terms, system, accuracy = 1.e-10, fast_path = False, threshold = None, verbose = False):
    """Uses Telen and VanBarels matrix reduction method to find a vector basis for the system of polynomials
    and the normal forms of the monomials in it.

    Parameters
    --------
    matrix : numpy array
        The Macaulay matrix of the system.
    matrix_terms : MonomialTable
        The monomials of the columns, highest degree first.
    system : System
        The system the matrix was built from.
    accuracy: float
        How small we want a number to be before assuming it is zero.
    fast_path : bool
        Use the two variable, equal degree optimization, which keeps the densest
        columns out of the pivoted QR.
    threshold : float
        The nonzero count at which the fast path keeps a column out of the basis.
        Defaults to eta(d).
    verbose : bool
        Prints information about the reduction.

    Returns
    -----------
    N : numpy array
        Row i is the normal form of the i'th monomial of matrix_terms.
    matrix_terms : MonomialTable
        The monomials in the new column order.
    VB : MonomialTable
        The monomials in the vector basis. These are the last ones in matrix_terms.
    """
    number_of_roots = system.bezout_number
    degree = int(matrix_terms.degrees.max())

    reduced = None
    if fast_path:
        if system.dim != 2 or len(set(system.degrees)) != 1:
            raise ValueError("The fast path only works for two polynomials of the same degree")
        if threshold is None:
            threshold = eta(system.degrees[0])
        order, cut = fast_path_columns(matrix, matrix_terms, degree, threshold)
        if verbose:
            print('\nFast path keeps', cut - highest_cut(matrix_terms, degree), 'extra columns out of the basis')
        try:
            reduced = rrqr_reduceTelenVanBarel(matrix[:,order], matrix_terms.permuted(order), cut,
                                               number_of_roots, accuracy = accuracy)
        except DegeneracyError:
            if verbose:
                print('Fast path columns are not independent, using the general reduction')

    if reduced is None:
        cut = highest_cut(matrix_terms, degree)
        if verbose:
            print('\nLocation of Cut in the Macaulay Matrix into [ M_t | M* ]\n', cut)
        reduced = rrqr_reduceTelenVanBarel(matrix, matrix_terms, cut, number_of_roots, accuracy = accuracy)

    matrix, matrix_terms = reduced
    N = normal_forms(matrix, number_of_roots)
    VB = matrix_terms[-number_of_roots:]

    if verbose:
        np.set_printoptions(suppress=True, linewidth=200)
        print("\nFinal Macaulay Matrix\n", matrix)
        print("\nVector Basis\n", VB.terms)
    return N, matrix_terms, VB
