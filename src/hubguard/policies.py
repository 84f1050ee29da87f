"""Named per-domain guards used by route handlers and UI.

Every function here is a thin composition of the role-axis guards.
"""

from __future__ import annotations

from hubguard.capabilities import Capability
from hubguard.guards import can_do, has_min_role, is_owner_of_any
from hubguard.models import UserWithAccess
from hubguard.roles import Role

C = Capability


# Users


def can_view_users(user: UserWithAccess, group_id: str) -> bool:
    """Check if the user can list the group's users."""
    return can_do(user, group_id, C.USERS_VIEW)


def can_create_user(user: UserWithAccess, group_id: str) -> bool:
    """Check if the user can add users to the group."""
    return can_do(user, group_id, C.USERS_CREATE)


def can_edit_user(user: UserWithAccess, group_id: str, target_user_id: str) -> bool:
    """Users can always edit their own profile."""
    if user.id == target_user_id:
        return True
    return can_do(user, group_id, C.USERS_EDIT)


def can_delete_user(user: UserWithAccess, group_id: str, target_user_id: str) -> bool:
    """Nobody can delete their own account."""
    if user.id == target_user_id:
        return False
    return can_do(user, group_id, C.USERS_DELETE)


def can_manage_roles(user: UserWithAccess, group_id: str) -> bool:
    """Check if the user can change roles in the group (Admin and above)."""
    return has_min_role(user, group_id, Role.ADMIN)


def can_access_users_panel(user: UserWithAccess) -> bool:
    """Check if the user can open the users panel (Owner of any group)."""
    return is_owner_of_any(user)


# Groups


def can_view_groups(user: UserWithAccess, group_id: str) -> bool:
    """Check if the user can view the group."""
    return can_do(user, group_id, C.GROUPS_VIEW)


def can_create_group(user: UserWithAccess) -> bool:
    """Check if the user can create groups (Owner of any group)."""
    return is_owner_of_any(user)


def can_edit_group(user: UserWithAccess, group_id: str) -> bool:
    """Check if the user can edit the group."""
    return can_do(user, group_id, C.GROUPS_EDIT)


def can_delete_group(user: UserWithAccess, group_id: str) -> bool:
    """Check if the user can delete the group."""
    return can_do(user, group_id, C.GROUPS_DELETE)


def can_manage_members(user: UserWithAccess, group_id: str) -> bool:
    """Check if the user can manage group members (Admin and above)."""
    return has_min_role(user, group_id, Role.ADMIN)


# Projects


def can_view_projects(user: UserWithAccess, group_id: str) -> bool:
    """Check if the user can view projects."""
    return can_do(user, group_id, C.PROJECTS_VIEW)


def can_create_project(user: UserWithAccess, group_id: str) -> bool:
    """Check if the user can create projects."""
    return can_do(user, group_id, C.PROJECTS_CREATE)


def can_edit_project(user: UserWithAccess, group_id: str) -> bool:
    """Check if the user can edit projects."""
    return can_do(user, group_id, C.PROJECTS_EDIT)


def can_delete_project(user: UserWithAccess, group_id: str) -> bool:
    """Check if the user can delete projects."""
    return can_do(user, group_id, C.PROJECTS_DELETE)


def can_archive_project(user: UserWithAccess, group_id: str) -> bool:
    """Check if the user can archive projects."""
    return can_do(user, group_id, C.PROJECTS_ARCHIVE)


def can_manage_project_members(user: UserWithAccess, group_id: str) -> bool:
    """Check if the user can staff projects (Manager and above)."""
    return has_min_role(user, group_id, Role.MANAGER)


def can_view_project_stats(user: UserWithAccess, group_id: str) -> bool:
    """Check if the user can view project statistics."""
    return can_do(user, group_id, C.PROJECTS_VIEW_STATS)


def can_export_project(user: UserWithAccess, group_id: str) -> bool:
    """Check if the user can export projects."""
    return can_do(user, group_id, C.PROJECTS_EXPORT)


# Tasks


def can_view_tasks(user: UserWithAccess, group_id: str) -> bool:
    """Check if the user can view tasks."""
    return can_do(user, group_id, C.TASKS_VIEW)


def can_create_task(user: UserWithAccess, group_id: str) -> bool:
    """Check if the user can create tasks."""
    return can_do(user, group_id, C.TASKS_CREATE)


def can_edit_task(user: UserWithAccess, group_id: str, assignee_id: str | None = None) -> bool:
    """The assignee can always edit their own task."""
    if assignee_id is not None and assignee_id == user.id:
        return True
    return can_do(user, group_id, C.TASKS_EDIT)


def can_delete_task(user: UserWithAccess, group_id: str) -> bool:
    """Check if the user can delete tasks."""
    return can_do(user, group_id, C.TASKS_DELETE)


def can_assign_task(user: UserWithAccess, group_id: str) -> bool:
    """Check if the user can assign tasks."""
    return can_do(user, group_id, C.TASKS_ASSIGN)


def can_manage_subtasks(user: UserWithAccess, group_id: str) -> bool:
    """Check if the user can add and edit subtasks."""
    return can_do(user, group_id, C.TASKS_MANAGE_SUBTASKS)


def can_change_task_status(user: UserWithAccess, group_id: str) -> bool:
    """Check if the user can move tasks between statuses."""
    return can_do(user, group_id, C.TASKS_CHANGE_STATUS)


def can_change_task_priority(user: UserWithAccess, group_id: str) -> bool:
    """Check if the user can reprioritize tasks."""
    return can_do(user, group_id, C.TASKS_CHANGE_PRIORITY)


def can_view_all_tasks(user: UserWithAccess, group_id: str) -> bool:
    """Check if the user can see tasks assigned to others."""
    return can_do(user, group_id, C.TASKS_VIEW_ALL)


def can_export_tasks(user: UserWithAccess, group_id: str) -> bool:
    """Check if the user can export tasks."""
    return can_do(user, group_id, C.TASKS_EXPORT)


# Meetings


def can_view_meetings(user: UserWithAccess, group_id: str) -> bool:
    """Check if the user can view meetings."""
    return can_do(user, group_id, C.MEETINGS_VIEW)


def can_create_meeting(user: UserWithAccess, group_id: str) -> bool:
    """Check if the user can schedule meetings."""
    return can_do(user, group_id, C.MEETINGS_CREATE)


def can_edit_meeting(user: UserWithAccess, group_id: str) -> bool:
    """Check if the user can edit meetings."""
    return can_do(user, group_id, C.MEETINGS_EDIT)


def can_delete_meeting(user: UserWithAccess, group_id: str) -> bool:
    """Check if the user can delete meetings."""
    return can_do(user, group_id, C.MEETINGS_DELETE)


def can_manage_meeting_attendees(user: UserWithAccess, group_id: str) -> bool:
    """Check if the user can invite and remove attendees."""
    return can_do(user, group_id, C.MEETINGS_MANAGE_ATTENDEES)


def can_view_meeting_notes(user: UserWithAccess, group_id: str) -> bool:
    """Check if the user can read meeting notes."""
    return can_do(user, group_id, C.MEETINGS_VIEW_NOTES)


def can_edit_meeting_notes(user: UserWithAccess, group_id: str) -> bool:
    """Check if the user can write meeting notes."""
    return can_do(user, group_id, C.MEETINGS_EDIT_NOTES)


def can_export_meetings(user: UserWithAccess, group_id: str) -> bool:
    """Check if the user can export meetings."""
    return can_do(user, group_id, C.MEETINGS_EXPORT)


# Absences


def can_view_absences(user: UserWithAccess, group_id: str) -> bool:
    """Check if the user can view absences."""
    return can_do(user, group_id, C.ABSENCES_VIEW)


def can_create_absence(user: UserWithAccess, group_id: str) -> bool:
    """Check if the user can declare an absence."""
    return can_do(user, group_id, C.ABSENCES_CREATE)


def can_approve_absence(user: UserWithAccess, group_id: str) -> bool:
    """Check if the user can approve or reject absences."""
    return can_do(user, group_id, C.ABSENCES_APPROVE)


def can_delete_absence(user: UserWithAccess, group_id: str, absence_user_id: str) -> bool:
    """Own absences need the create capability, anyone else's need approval rights."""
    if user.id == absence_user_id:
        return can_do(user, group_id, C.ABSENCES_CREATE)
    return can_do(user, group_id, C.ABSENCES_APPROVE)


def can_manage_absences(user: UserWithAccess, group_id: str) -> bool:
    """Check if the user can manage absences for others (Manager and above)."""
    return has_min_role(user, group_id, Role.MANAGER)


# Recruitment


def can_view_recruitment(user: UserWithAccess, group_id: str) -> bool:
    """Check if the user can view job offers."""
    return can_do(user, group_id, C.RECRUITMENT_VIEW)


def can_create_offer(user: UserWithAccess, group_id: str) -> bool:
    """Check if the user can publish job offers."""
    return can_do(user, group_id, C.RECRUITMENT_CREATE)


def can_edit_offer(user: UserWithAccess, group_id: str) -> bool:
    """Check if the user can edit job offers."""
    return can_do(user, group_id, C.RECRUITMENT_EDIT)


def can_manage_candidates(user: UserWithAccess, group_id: str) -> bool:
    """Check if the user can manage candidates (Manager and above)."""
    return has_min_role(user, group_id, Role.MANAGER)


# Training


def can_view_trainings(user: UserWithAccess, group_id: str) -> bool:
    """Check if the user can view trainings."""
    return can_do(user, group_id, C.TRAINING_VIEW)


def can_create_training(user: UserWithAccess, group_id: str) -> bool:
    """Check if the user can create trainings."""
    return can_do(user, group_id, C.TRAINING_CREATE)


def can_edit_training(user: UserWithAccess, group_id: str) -> bool:
    """Check if the user can edit trainings."""
    return can_do(user, group_id, C.TRAINING_EDIT)


def can_manage_trainings(user: UserWithAccess, group_id: str) -> bool:
    """Check if the user can manage training sessions (Manager and above)."""
    return has_min_role(user, group_id, Role.MANAGER)


# Notifications


def can_view_own_notifications() -> bool:
    """Every signed-in user reads their own notifications."""
    return True


def can_send_notification(user: UserWithAccess, group_id: str) -> bool:
    """Check if the user can send notifications to the group (Admin and above)."""
    return has_min_role(user, group_id, Role.ADMIN)
