# prompthub/schemas/__init__.py
"""
Schema package
Only the commonly shared schemas are exposed here; import the rest from their modules.
"""

from .commons_schemas import BaseResponse, ErrorResponse, Principal

# from .stats_schemas import OwnerStats, PlatformStats
# from .prompt_schemas import ViewResponse, LikeResponse, PromptCreateRequest, PromptResponse
# from .user_schemas import ProfileUpdateRequest, ProfileUpdateResponse
# from .github_schemas import GithubStats
