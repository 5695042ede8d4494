import logging
import sys

from compact_binary.codec.verify import verify_roundtrip
from compact_binary.shared.config import VERIFY_START, VERIFY_STOP

def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    start: int = VERIFY_START
    stop: int = VERIFY_STOP
    report = verify_roundtrip(start, stop)

    print(f"Checked {report['checked']} values ({start}..{stop - 1}), "
          f"longest codeword {report['max_length']} bits, {len(report['failures'])} failures")

    if report["failures"]:
        sys.exit(1)

if __name__ == "__main__":
    main()
