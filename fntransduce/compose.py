from fntransduce.transducers import identity_t


def _check_transducers(xforms):
    for position, xform in enumerate(xforms):
        if not callable(xform):
            raise TypeError("comp argument %d is not a transducer: %r" % (position, xform))


def comp(*xforms):
    """
    Composes transducers so items flow through them left to right.

    comp(a, b, c)(rf) == a(b(c(rf)))

    The reducing function is built from the right, so a sees each item first
    and hands its output to b. Compositions nest: comp(comp(a, b), c) behaves
    like comp(a, b, c).
    """
    _check_transducers(xforms)
    if len(xforms) == 0:
        return identity_t
    if len(xforms) == 1:
        return xforms[0]

    def composed(rf):
        for xform in reversed(xforms):
            rf = xform(rf)
        return rf
    return composed
