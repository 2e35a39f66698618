"""
Business logic services for the Slack draft webhook

Service layer providing clean interfaces to store operations.
"""

from .team_service import TeamService, team_service
from .player_service import PlayerService
from .draft_sync_service import DraftSyncService, SyncResult, SyncStatus

__all__ = [
    'TeamService', 'team_service',
    'PlayerService',
    'DraftSyncService', 'SyncResult', 'SyncStatus',
]
