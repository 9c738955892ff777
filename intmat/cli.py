"""Command-line client: intmat <command> [args]."""
import argparse
import logging
import sys

import numpy as np

from . import codec, matrix
from .errors import MatrixError, RangeError

logger = logging.getLogger(__name__)


def _emit(m, args):
    if args.output:
        codec.save(m, args.output)
    else:
        codec.write(m, sys.stdout)


def cmd_show(args):
    m = codec.load(args.matrix, strict=args.strict)
    print(f"# {m.rows}x{m.columns}")
    codec.write(m, sys.stdout)
    return 0


def cmd_identity(args):
    _emit(matrix.identity(args.n), args)
    return 0


def cmd_random(args):
    if args.seed is not None and args.seed < 0:
        raise RangeError(f"random: seed must be non-negative, got {args.seed}")
    rng = np.random.default_rng(args.seed) if args.seed is not None else None
    _emit(matrix.rand((args.rows, args.columns), args.min, args.max, rng=rng), args)
    return 0


def cmd_sum(args):
    a = codec.load(args.a, strict=args.strict)
    b = codec.load(args.b, strict=args.strict)
    _emit(matrix.sum(a, b), args)
    return 0


def cmd_scale(args):
    m = codec.load(args.matrix, strict=args.strict)
    _emit(matrix.scalar_product(m, args.scalar), args)
    return 0


def cmd_transpose(args):
    m = codec.load(args.matrix, strict=args.strict)
    _emit(matrix.transpose(m), args)
    return 0


def cmd_product(args):
    a = codec.load(args.a, strict=args.strict)
    b = codec.load(args.b, strict=args.strict)
    _emit(matrix.product(a, b), args)
    return 0


def cmd_equal(args):
    a = codec.load(args.a, strict=args.strict)
    b = codec.load(args.b, strict=args.strict)
    same = matrix.equal(a, b)
    print("equal" if same else "different")
    return 0 if same else 1


def build_parser():
    parser = argparse.ArgumentParser(prog="intmat", description="Integer matrix toolkit")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    parser.add_argument("--strict", action="store_true", help="reject short rows and non-integer tokens")
    sub = parser.add_subparsers(dest="command", required=True)

    def with_output(p):
        p.add_argument("-o", "--output", help="write the result here instead of stdout")
        return p

    p = sub.add_parser("show", help="print a matrix file and its dimensions")
    p.add_argument("matrix")
    p.set_defaults(func=cmd_show)

    p = with_output(sub.add_parser("identity", help="n x n identity matrix"))
    p.add_argument("n", type=int)
    p.set_defaults(func=cmd_identity)

    p = with_output(sub.add_parser("random", help="random matrix with values in [min, max]"))
    p.add_argument("rows", type=int)
    p.add_argument("columns", type=int)
    p.add_argument("--min", type=int, default=0)
    p.add_argument("--max", type=int, default=9)
    p.add_argument("--seed", type=int, default=None)
    p.set_defaults(func=cmd_random)

    p = with_output(sub.add_parser("sum", help="a + b"))
    p.add_argument("a")
    p.add_argument("b")
    p.set_defaults(func=cmd_sum)

    p = with_output(sub.add_parser("scale", help="matrix * scalar"))
    p.add_argument("matrix")
    p.add_argument("scalar", type=int)
    p.set_defaults(func=cmd_scale)

    p = with_output(sub.add_parser("transpose", help="transpose of a matrix"))
    p.add_argument("matrix")
    p.set_defaults(func=cmd_transpose)

    p = with_output(sub.add_parser("product", help="a @ b"))
    p.add_argument("a")
    p.add_argument("b")
    p.set_defaults(func=cmd_product)

    p = sub.add_parser("equal", help="exit 0 if a == b, 1 otherwise")
    p.add_argument("a")
    p.add_argument("b")
    p.set_defaults(func=cmd_equal)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    try:
        return args.func(args)
    except MatrixError as e:
        # messages already start with the failing operation
        logger.debug("%s failed", args.command, exc_info=True)
        print(f"intmat: {e}", file=sys.stderr)
        return 1
    except (OverflowError, OSError) as e:
        logger.debug("%s failed", args.command, exc_info=True)
        print(f"intmat: {args.command}: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
