"""Run the demo beans through the injector command"""
from autoinject.core import ConsoleLogger, RealFileSystemService
from autoinject.demo import SomeBean, SomeInterface, SomeOtherInterface, build_registry
from autoinject.injection import (
    ImportLocator,
    Injector,
    MappingStore,
    describe_injected,
    type_identifier,
)
from autoinject.utils.config import ensure_mapping_file, resolve_mapping_path


def setup_parser(parser):
    """Setup argument parser for demo command"""
    parser.add_argument(
        '--config',
        help='Mapping file (created with demo defaults when missing)'
    )
    parser.add_argument(
        '--allow-import',
        action='store_true',
        help='Resolve implementations by importing their dotted path instead of the demo registry'
    )


def execute(args):
    """Execute demo command"""
    path = resolve_mapping_path(args.config)
    logger = ConsoleLogger()
    filesystem = RealFileSystemService()
    ensure_mapping_file(path, filesystem, logger)

    print("=== 1) Without injection (should fail) ===")
    try:
        SomeBean().foo()
    except AttributeError as e:
        print(f"[Expected] AttributeError because fields are not injected yet: {e}")

    print()
    print("=== 2) With injection ===")
    mapping = MappingStore.load(path, filesystem=filesystem)
    print("[Config] Active mappings:")
    for abstraction in (SomeInterface, SomeOtherInterface):
        key = type_identifier(abstraction)
        print(f"  {key} = {mapping.get(key)}")

    locator = ImportLocator() if args.allow_import else build_registry()
    bean = Injector(mapping, locator, logger=logger).inject(SomeBean())

    print(f"[Debug] Injected fields of {type(bean).__name__}:")
    for name, abstraction, implementation in describe_injected(bean):
        print(f"  {name} ({abstraction}) = {implementation or 'None'}")

    print(f"[Result] foo() output: {bean.foo()}")
    return 0
