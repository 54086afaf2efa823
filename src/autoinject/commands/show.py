"""Print the active mapping command"""
from autoinject.injection import MappingStore
from autoinject.utils.config import resolve_mapping_path


def setup_parser(parser):
    """Setup argument parser for show command"""
    parser.add_argument(
        '--config',
        help='Mapping file to read (default: $AUTOINJECT_CONFIG or injector.properties)'
    )


def execute(args):
    """Execute show command"""
    mapping = MappingStore.load(resolve_mapping_path(args.config))

    print(f"[Config] Active mappings ({mapping.source}):")
    if not len(mapping):
        print("  (none)")
    for key, value in mapping.items():
        print(f"  {key} = {value or '<blank>'}")
    return 0
