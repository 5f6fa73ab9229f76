def test_can_import_all_protocols():
    # Import must succeed and expose the expected names
    import treeconcat.core.interfaces as I

    assert hasattr(I, "IgnoreMatcherProtocol")
    assert hasattr(I, "LoggerFactoryProtocol")
    assert hasattr(I, "LoggerLikeProtocol")
    assert hasattr(I, "WalkerProtocol")


def test_concrete_types_satisfy_protocols():
    from treeconcat.core.interfaces import IgnoreMatcherProtocol, LoggerFactoryProtocol, WalkerProtocol
    from treeconcat.core.models import WalkOptions
    from treeconcat.io.ignore import GitIgnoreMatcher
    from treeconcat.io.walker import TreeWalker
    from treeconcat.logging.factory import DefaultLoggerFactory

    assert isinstance(GitIgnoreMatcher.empty(), IgnoreMatcherProtocol)
    assert isinstance(TreeWalker(WalkOptions()), WalkerProtocol)
    assert isinstance(DefaultLoggerFactory(), LoggerFactoryProtocol)


def test_project_loggers_satisfy_logger_protocol():
    from treeconcat.core.interfaces import LoggerLikeProtocol
    from treeconcat.logging.factory import DefaultLoggerFactory
    from treeconcat.logging.helpers import get_logger

    assert isinstance(get_logger("io.walker"), LoggerLikeProtocol)
    assert isinstance(DefaultLoggerFactory().get_logger("cli"), LoggerLikeProtocol)
