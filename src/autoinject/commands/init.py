"""Write the default mapping file command"""
from autoinject.core import ConsoleLogger, RealFileSystemService
from autoinject.utils.config import ensure_mapping_file, resolve_mapping_path


def setup_parser(parser):
    """Setup argument parser for init command"""
    parser.add_argument(
        '--config',
        help='Mapping file to create (default: $AUTOINJECT_CONFIG or injector.properties)'
    )
    parser.add_argument(
        '--force',
        action='store_true',
        help='Overwrite an existing mapping file'
    )


def execute(args):
    """Execute init command"""
    path = resolve_mapping_path(args.config)
    logger = ConsoleLogger()

    if not ensure_mapping_file(path, RealFileSystemService(), logger, force=args.force):
        print(f"{path} already exists (use --force to overwrite)")
    return 0
