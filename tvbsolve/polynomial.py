import numpy as np
from numba import jit
from tvbsolve.MonomialOrder import gl_ordering

@jit(nopython=True, cache=True)
def polyval_terms(coeffs, exponents, point): #pragma: no cover
    total = 0j
    for i in range(coeffs.shape[0]):
        term = coeffs[i] + 0j
        for j in range(exponents.shape[1]):
            for _ in range(exponents[i, j]):
                term *= point[j]
        total += term
    return total

class Polynomial(object):
    '''
    A polynomial in the power basis, stored as a list of terms.

    Attributes
    ----------
    coeffs
        1D array, the coefficient of each term.
    exponents
        2D integer array, the i'th row is the exponents of the i'th term.
    dim
        The number of variables.
    degree
        The largest total degree of a term. 0 for the zero polynomial.

    Parameters
    ----------
    coeffs : array-like
        The coefficients.
    exponents : array-like
        One exponent vector for each coefficient. Exponent vectors that show up
        more than once have their coefficients added together and terms with a
        zero coefficient are dropped.
    dim : int
        The number of variables. Only needed when there are no terms.

    Methods
    -------
    __call__
        Evaluates the polynomial at a point.
    mon_mult
        Multiplies the polynomial by a monomial.
    terms
        The (exponents, coefficient) pairs.
    '''
    def __init__(self, coeffs, exponents, dim=None):
        coeffs = np.array(coeffs, dtype=float).ravel()
        exponents = np.array(exponents, dtype=np.int64)
        if exponents.size == 0:
            if dim is None:
                raise ValueError("A polynomial without terms needs to know its dimension")
            exponents = exponents.reshape((0, dim))
        elif exponents.ndim == 1 and len(coeffs) == 1:
            exponents = exponents.reshape((1, -1))
        if exponents.ndim != 2 or exponents.shape[0] != len(coeffs):
            raise ValueError("There must be exactly one exponent vector for each coefficient")
        if dim is not None and exponents.shape[1] != dim:
            raise ValueError("Exponent vectors must have length {}".format(dim))
        if np.any(exponents < 0):
            raise ValueError("Exponents must be nonnegative")

        #Combine repeated monomials, keeping the order of first appearance.
        merged = {}
        for coeff, mon in zip(coeffs, map(tuple, exponents.tolist())):
            merged[mon] = merged.get(mon, 0.) + coeff
        mons = [mon for mon in merged if merged[mon] != 0]

        self.dim = exponents.shape[1]
        self.coeffs = np.array([merged[mon] for mon in mons], dtype=float)
        self.exponents = np.array(mons, dtype=np.int64).reshape((len(mons), self.dim))
        self.coeffs.setflags(write=False)
        self.exponents.setflags(write=False)
        if len(mons) > 0:
            self.degree = int(self.exponents.sum(axis=1).max())
        else:
            self.degree = 0

    @classmethod
    def from_coeff_matrix(cls, coeff):
        '''Makes a Polynomial out of a dense coefficient tensor.

        The entry of coeff at index (i,j,...) is the coefficient of x^i y^j ...
        '''
        coeff = np.asarray(coeff, dtype=float)
        spots = np.argwhere(coeff != 0)
        return cls(coeff[tuple(spots.T)], spots, dim=coeff.ndim)

    def terms(self):
        '''Returns the (exponents, coefficient) pairs of the polynomial.

        dict(p.terms()) maps each monomial of p to its coefficient.
        '''
        return [(tuple(mon), c) for mon, c in zip(self.exponents.tolist(), self.coeffs.tolist())]

    def mon_mult(self, mon):
        '''Multiplies the polynomial by the monomial with exponents mon.'''
        mon = np.asarray(mon, dtype=np.int64)
        if mon.shape != (self.dim,):
            raise ValueError("Monomial must have {} exponents".format(self.dim))
        return Polynomial(self.coeffs, self.exponents + mon, dim=self.dim)

    def __call__(self, point):
        '''
        Evaluates the polynomial at the given point.

        Parameters
        ----------
        point : array-like
            the point at which to evaluate the polynomial

        Returns
        -------
        __call__: complex or float
            value of the polynomial at the given point. Real points give real values.
        '''
        point = np.asarray(point)
        if point.shape != (self.dim,):
            raise ValueError("Point must have {} coordinates".format(self.dim))
        value = polyval_terms(self.coeffs, self.exponents, point.astype(np.complex128))
        if np.isrealobj(point):
            return value.real
        return value

    def __eq__(self, other):
        if not isinstance(other, Polynomial) or self.dim != other.dim:
            return False
        return dict(self.terms()) == dict(other.terms())

    def __ne__(self, other):
        return not self == other

    def __repr__(self):
        return 'Polynomial({} terms, degree {}, {} variables)'.format(len(self.coeffs), self.degree, self.dim)

class System(object):
    '''
    A square system of polynomials with their declared degrees.

    Attributes
    ----------
    polys
        Tuple of the polynomials f1, ..., fn.
    degrees
        Tuple of the declared degrees d1, ..., dn.
    dim
        The number of variables n, which is also the number of polynomials.

    Parameters
    ----------
    polys : list
        The Polynomial objects.
    degrees : list
        The declared degree of each polynomial. Defaults to the degrees of the polynomials.
        No term may have total degree larger than its declared degree.
    '''
    def __init__(self, polys, degrees=None):
        polys = tuple(polys)
        if len(polys) == 0:
            raise ValueError("A system needs at least one polynomial")
        dim = polys[0].dim
        if len(polys) != dim or any(poly.dim != dim for poly in polys):
            raise ValueError("Need exactly as many polynomials as variables")
        if degrees is None:
            degrees = [poly.degree for poly in polys]
        degrees = tuple(int(d) for d in degrees)
        if len(degrees) != dim:
            raise ValueError("Need one declared degree for each polynomial")
        for i, (poly, deg) in enumerate(zip(polys, degrees)):
            if deg < 1:
                raise ValueError("Declared degrees must be positive")
            if poly.degree > deg:
                raise ValueError("Polynomial {} has degree {}, more than the declared {}".format(i, poly.degree, deg))
        self.polys = polys
        self.degrees = degrees
        self.dim = dim

    @classmethod
    def from_stacked(cls, f, degrees):
        '''Makes a System out of a stacked coefficient/exponent matrix.

        For n polynomials f has 2n rows. Row i < n holds the coefficients of f_i,
        and column k of rows n to 2n-1 holds the exponents of the monomial that
        the coefficients in column k go with.
        '''
        f = np.asarray(f, dtype=float)
        dim = len(degrees)
        if f.ndim != 2 or f.shape[0] != 2*dim:
            raise ValueError("A stacked system in {} variables needs {} rows".format(dim, 2*dim))
        exponents = f[dim:].T
        if not np.allclose(exponents, np.round(exponents)):
            raise ValueError("Exponents must be integers")
        exponents = np.round(exponents).astype(np.int64)
        return cls([Polynomial(row, exponents, dim=dim) for row in f[:dim]], degrees)

    @property
    def bezout_number(self):
        return int(np.prod(self.degrees))

    def __len__(self):
        return self.dim

    def __iter__(self):
        return iter(self.polys)

    def __getitem__(self, i):
        return self.polys[i]

    def __call__(self, point):
        '''Evaluates every polynomial in the system at point.'''
        return np.array([poly(point) for poly in self.polys])

    def __repr__(self):
        return 'System({} polynomials, degrees {})'.format(self.dim, list(self.degrees))

def random_system(dim, degrees, seed=None):
    '''
    A helper for testing. Returns a System whose polynomials have every term up to the
    declared degree, with normally distributed coefficients. Such systems are generic
    with probability one.
    '''
    state = np.random.RandomState(seed)
    if np.isscalar(degrees):
        degrees = [degrees]*dim
    if len(degrees) != dim:
        raise ValueError("Need one degree for each polynomial")
    polys = list()
    for deg in degrees:
        mons = gl_ordering(dim, deg, ascending=True)
        polys.append(Polynomial(state.randn(len(mons)), mons.terms, dim=dim))
    return System(polys, degrees)
