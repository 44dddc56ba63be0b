import logging

from time_service.config import parse_args
from time_service.server import create_app, run


def main(argv=None):
    args = parse_args(argv)

    # Configure logging
    logging.basicConfig(level=getattr(logging, args.log_level))

    app = create_app()
    run(app, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
