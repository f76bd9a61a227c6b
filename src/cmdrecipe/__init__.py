from ._version import __version_info__, __version__  # noqa
from .config import (  # noqa
    import_command_type,
    invocation_from_dict,
    invocations_from_config,
)
from .exceptions import (  # noqa
    CmdRecipeError,
    CommandNotFound,
    DuplicateCommand,
    InvalidInvocation,
)
from .invocation import (  # noqa
    Builder,
    ByName,
    ByType,
    Invocation,
    Resolution,
    for_name,
    for_type,
)
from .manager import (  # noqa
    Command,
    CommandManager,
    CommandMetadata,
    CommandRegistry,
    Metadata,
    metadata,
)
