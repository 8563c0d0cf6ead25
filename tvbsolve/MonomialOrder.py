import numpy as np
from tvbsolve.utils import memoize, num_mons_full

@memoize
def mons_of_degree(deg, dim):
    '''Finds all the monomials of a given degree and returns them. Works recursively.

    The monomials come in descending lexicographic order, so (deg,0,...,0) is
    first and (0,...,0,deg) is last.

    Parameters
    ----------
    deg : int
        The total degree of the monomials desired.
    dim : int
        The number of variables.

    Returns
    -------
    mons_of_degree : tuple
        Tuples of exponents, one for each monomial.
    '''
    if deg < 0:
        return tuple()
    if dim == 1: #No more recursion.
        return ((deg,),)
    answers = list()
    for i in range(deg, -1, -1): #Recursively fill in the remaining variables.
        for rest in mons_of_degree(deg-i, dim-1):
            answers.append((i,) + rest)
    return tuple(answers)

class MonomialTable(object):
    '''
    An ordered collection of distinct monomials.

    The position of a monomial in the table is the index of the matrix column
    (or row) that represents it. Tables are never changed once built, reordering
    one gives a new table.

    Attributes
    ----------
    dim
        The number of variables.
    terms
        Integer array, the i'th row is the exponents of the i'th monomial.
    degrees
        The total degree of each monomial.

    Parameters
    ----------
    terms : array-like
        Exponent vectors, one per monomial.
    dim : int
        The number of variables. Only needed when terms is empty.
    '''
    def __init__(self, terms, dim=None):
        terms = np.array(terms, dtype=int)
        if terms.size == 0:
            if dim is None:
                raise ValueError("An empty MonomialTable needs to know its dimension")
            terms = terms.reshape((0, dim))
        if terms.ndim != 2:
            raise ValueError("Monomials must all have the same number of variables")
        if np.any(terms < 0):
            raise ValueError("Exponents must be nonnegative")
        self._terms = terms
        self._terms.setflags(write=False)
        self.dim = terms.shape[1]
        self._spots = {}
        for spot, mon in enumerate(map(tuple, terms.tolist())):
            if mon in self._spots:
                raise ValueError("Monomial {} is repeated in the table".format(mon))
            self._spots[mon] = spot

    @property
    def terms(self):
        return self._terms.copy()

    @property
    def degrees(self):
        return self._terms.sum(axis=1)

    def __len__(self):
        return self._terms.shape[0]

    def __iter__(self):
        return iter(map(tuple, self._terms.tolist()))

    def __getitem__(self, spot):
        if isinstance(spot, (int, np.integer)):
            return tuple(self._terms[spot].tolist())
        return MonomialTable(self._terms[spot], self.dim)

    def __contains__(self, mon):
        return self.find(mon) != -1

    def __eq__(self, other):
        if not isinstance(other, MonomialTable):
            return False
        return np.array_equal(self._terms, other._terms)

    def __ne__(self, other):
        return not self == other

    def __repr__(self):
        return 'MonomialTable({} monomials in {} variables)'.format(len(self), self.dim)

    def find(self, mon):
        '''Returns the position of mon in the table, -1 if it is not there.'''
        return self._spots.get(tuple(int(i) for i in mon), -1)

    def index(self, mon):
        '''Returns the position of mon in the table. Raises KeyError if it is not there.'''
        spot = self.find(mon)
        if spot == -1:
            raise KeyError(tuple(mon))
        return spot

    def permuted(self, P):
        '''A new table whose i'th monomial is the P[i]'th monomial of this one.'''
        return MonomialTable(self._terms[np.asarray(P)], self.dim)

    def concatenate(self, other):
        '''A new table with the monomials of other after the ones of this one.'''
        return MonomialTable(np.vstack((self._terms, other._terms)), self.dim)

def gl_ordering(dim, degree, ascending=False, low=0):
    '''Makes the table of all the monomials with total degree between low and degree.

    Parameters
    ----------
    dim : int
        The number of variables.
    degree : int
        The largest total degree in the table.
    ascending : bool
        If True the monomials of degree low come first, otherwise the ones of
        the given degree come first. Inside a degree the order is descending
        lexicographic either way.
    low : int
        The smallest total degree in the table.

    Returns
    -------
    gl_ordering : MonomialTable
        The monomials in graded lexicographic order.
    '''
    if dim < 1:
        raise ValueError("Need at least one variable")
    low = max(low, 0)
    degs = range(low, degree+1)
    if not ascending:
        degs = reversed(degs)
    terms = list()
    for deg in degs:
        terms.extend(mons_of_degree(deg, dim))
    return MonomialTable(terms, dim)

def table_size(dim, degree, low=0):
    '''The number of monomials gl_ordering(dim, degree, low=low) has.'''
    return num_mons_full(degree, dim) - num_mons_full(low-1, dim)
