"""
autoinject - field injection driven by an interface -> implementation mapping

Declare injectable fields with ``Injectable``, map abstractions to
implementations in a properties (or YAML) file, and let ``Injector`` fill the
fields of any object you hand it.
"""
import argparse
import sys

from autoinject.injection import (
    ConfigLoadError,
    FieldDeclarationError,
    ImmutableFieldError,
    ImplementationNotFoundError,
    ImplementationRegistry,
    ImportLocator,
    IncompatibleTypeError,
    Injectable,
    InjectionError,
    InjectionRecord,
    Injector,
    InstantiationError,
    MappingStore,
    UnresolvedDependencyError,
    register_field,
)

__version__ = "1.0.0"


def main(argv=None):
    """Main CLI entry point"""
    from autoinject.commands import demo, init, show

    parser = argparse.ArgumentParser(
        prog='autoinject',
        description='autoinject: interface -> implementation field injection',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  autoinject init                          # Write default injector.properties
  autoinject show                          # Print active mappings
  autoinject demo                          # Inject the demo bean and call it
  autoinject demo --config wiring.yaml     # Same, from a YAML mapping
        '''
    )

    subparsers = parser.add_subparsers(dest='command', help='Command to execute')

    # Init command
    init_parser = subparsers.add_parser('init', help='Write the default mapping file')
    init.setup_parser(init_parser)

    # Show command
    show_parser = subparsers.add_parser('show', help='Print active mappings')
    show.setup_parser(show_parser)

    # Demo command
    demo_parser = subparsers.add_parser('demo', help='Run the demo beans')
    demo.setup_parser(demo_parser)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    # Dispatch to command handler
    try:
        if args.command == 'init':
            return init.execute(args)
        elif args.command == 'show':
            return show.execute(args)
        elif args.command == 'demo':
            return demo.execute(args)
    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        return 130
    except InjectionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 1


__all__ = [
    "main",
    "Injector",
    "InjectionRecord",
    "MappingStore",
    "Injectable",
    "register_field",
    "ImplementationRegistry",
    "ImportLocator",
    "InjectionError",
    "ConfigLoadError",
    "FieldDeclarationError",
    "ImmutableFieldError",
    "UnresolvedDependencyError",
    "ImplementationNotFoundError",
    "IncompatibleTypeError",
    "InstantiationError",
]
