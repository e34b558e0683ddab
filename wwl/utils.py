
def remove_first(seq, c):
    """
    remove the first occurrence of c from sequence seq
    aka: seq.remove(c) but returns a new tuple and never raises
    """
    try:
        i = seq.index(c)
    except ValueError:
        return tuple(seq)

    return tuple(seq[:i]) + tuple(seq[i + 1:])

class dotdict(dict):
    """dot.notation access to dictionary attributes"""
    __getattr__ = lambda self, key: self[key]
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__
