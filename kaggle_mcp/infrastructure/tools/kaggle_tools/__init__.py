# Package initializer for Kaggle CLI tools
# Expose tool classes in catalog order
from .auth_tool import AuthCheckTool  # noqa: F401
from .notebook_tools import (  # noqa: F401
    ListNotebooksTool,
    CreateNotebookTool,
    NotebookStatusTool,
    DownloadOutputTool,
    PushNotebookTool,
    SaveNotebookMetadataTool,
    PullNotebookTool,
)
from .discovery_tools import SearchDatasetsTool, ListCompetitionsTool  # noqa: F401

CATALOG_ORDER = (
    AuthCheckTool,
    ListNotebooksTool,
    CreateNotebookTool,
    NotebookStatusTool,
    DownloadOutputTool,
    SearchDatasetsTool,
    ListCompetitionsTool,
    PushNotebookTool,
    SaveNotebookMetadataTool,
    PullNotebookTool,
)
