from typing import List, Optional

from .enums import TeamMembershipState
from .user import User
from .utils import Snowflake, snowflake_or_none


class TeamMember:

    __slots__ = [
        'team',
        'user',
        'membership_state',
        'permissions'
    ]

    def __init__(self, team: 'Team', **data):
        self.team: Team = team
        self.user: User = User(**data.get('user', {}), _client=team._client)
        self.membership_state: TeamMembershipState = TeamMembershipState(data.get('membership_state', 1))
        self.permissions: List[str] = data.get('permissions', [])

    def __repr__(self):
        return f'<TeamMember user={self.user!r} team_id={self.team.id}>'


class Team(Snowflake):
    """An application team, built fresh from every payload and never cached"""

    __slots__ = [
        'name',
        'icon',
        'owner_user_id',
        'members'
    ]

    def __init__(self, **data):
        super(Team, self).__init__(**data)
        self.name: str = data.get('name')
        self.icon: Optional[str] = data.get('icon')
        self.owner_user_id: Optional[Snowflake] = snowflake_or_none(data.get('owner_user_id'))
        self.members: List[TeamMember] = [TeamMember(self, **m) for m in data.get('members', [])]

    def __str__(self):
        return self.name

    def __repr__(self):
        return f'<Team id={self.id} name={self.name!r}>'

    @property
    def owner(self) -> Optional[TeamMember]:
        if self.owner_user_id is None:
            return None
        for member in self.members:
            if member.user.id == self.owner_user_id.id:
                return member
        return None

    def icon_url(self, format: Optional[str] = None, size: Optional[int] = None) -> Optional[str]:
        if not self.icon:
            return None
        return self._client.cdn.team_icon(self.id, self.icon, format=format, size=size)
