"""
Dashboard statistics.

Every function reads the current rows and recomputes its result; nothing is
cached, so numbers are never stale.

Contribution scoring: each file counts CONTRIBUTION_FILE_WEIGHT (3) points
and each comment CONTRIBUTION_COMMENT_WEIGHT (1) point. A user's percentage
is their share of the total score, rounded half up.
"""
import logging
from datetime import datetime, time, timedelta, timezone as dt_timezone
from decimal import Decimal, ROUND_HALF_UP

from django.conf import settings
from django.db.models import Count
from django.db.models.functions import TruncDate
from django.utils import timezone

from core.exceptions import InvalidInput
from apps.activity.models import Activity
from apps.comments.models import Comment
from apps.files.models import File
from apps.projects.models import ProjectMember
from apps.users.models import User

logger = logging.getLogger(__name__)

# Activity type -> chart label, in display order
ACTIVITY_CATEGORIES = [
    (Activity.UPLOAD, 'Uploads'),
    (Activity.UPDATE, 'Updates'),
    (Activity.COMMENT, 'Comments'),
]

FILE_ACTIVITY_TYPES = (Activity.UPLOAD, Activity.UPDATE)

MAX_WINDOW_DAYS = 365


def _round_half_up(value):
    return int(Decimal(value).quantize(Decimal('1'), rounding=ROUND_HALF_UP))


def _today_utc():
    return timezone.now().astimezone(dt_timezone.utc).date()


def get_stats():
    """
    Dashboard headline numbers and the two pie-chart histograms.

    ``days_active`` is never below 1 so an empty workspace does not show
    "0 days active".
    """
    uploads = File.objects.count()
    comments = Comment.objects.count()
    members = ProjectMember.objects.aggregate(
        n=Count('user', distinct=True)
    )['n']
    days_active = Activity.objects.annotate(
        day=TruncDate('timestamp', tzinfo=dt_timezone.utc)
    ).aggregate(n=Count('day', distinct=True))['n']

    file_types = [
        {'name': row['file_type'], 'value': row['value']}
        for row in File.objects.order_by('file_type').values('file_type').annotate(value=Count('id'))
    ]

    counts = dict(
        Activity.objects.order_by().values_list('type').annotate(value=Count('id'))
    )
    activity_by_category = [
        {'name': label, 'value': counts.get(activity_type, 0)}
        for activity_type, label in ACTIVITY_CATEGORIES
    ]

    return {
        'uploads': uploads,
        'comments': comments,
        'members': members,
        'days_active': max(days_active, 1),
        'file_types': file_types,
        'activity_by_category': activity_by_category,
    }


def _user_counts():
    return User.objects.annotate(
        files_count=Count('files', distinct=True),
        comments_count=Count('comments', distinct=True),
    ).order_by('id')


def get_contributions():
    """
    Per-user contribution share, highest first.

    Users with equal percentages keep their id order.
    """
    file_weight = getattr(settings, 'CONTRIBUTION_FILE_WEIGHT', 3)
    comment_weight = getattr(settings, 'CONTRIBUTION_COMMENT_WEIGHT', 1)

    rows = []
    for user in _user_counts():
        rows.append({
            'user_id': user.id,
            'user': {
                'name': user.display_name,
                'avatar_url': user.avatar_url,
            },
            'files_count': user.files_count,
            'comments_count': user.comments_count,
            'score': user.files_count * file_weight + user.comments_count * comment_weight,
        })

    total_score = sum(row['score'] for row in rows)
    for row in rows:
        if total_score > 0:
            row['percentage'] = _round_half_up(Decimal(100 * row['score']) / Decimal(total_score))
        else:
            row['percentage'] = 0

    return sorted(rows, key=lambda row: row['percentage'], reverse=True)


def resolve_window_days(window_days=None):
    if window_days is None:
        window_days = getattr(settings, 'ACTIVITY_WINDOW_DAYS', 14)
    try:
        window_days = int(window_days)
    except (TypeError, ValueError):
        raise InvalidInput("windowDays must be an integer")
    if not 1 <= window_days <= MAX_WINDOW_DAYS:
        raise InvalidInput(f"windowDays must be between 1 and {MAX_WINDOW_DAYS}")
    return window_days


def get_activity_by_day(window_days=None):
    """
    Daily file/comment activity for the trailing window ending today (UTC).

    Returns exactly ``window_days`` buckets in ascending date order; days
    without activity report zeros. Uploads and updates count as files.
    """
    window_days = resolve_window_days(window_days)

    today = _today_utc()
    start = today - timedelta(days=window_days - 1)
    start_dt = datetime.combine(start, time.min, tzinfo=dt_timezone.utc)
    end_dt = datetime.combine(today + timedelta(days=1), time.min, tzinfo=dt_timezone.utc)

    buckets = {
        start + timedelta(days=offset): {'files': 0, 'comments': 0}
        for offset in range(window_days)
    }

    rows = (
        Activity.objects
        .filter(
            timestamp__gte=start_dt,
            timestamp__lt=end_dt,
            type__in=FILE_ACTIVITY_TYPES + (Activity.COMMENT,),
        )
        .annotate(day=TruncDate('timestamp', tzinfo=dt_timezone.utc))
        .values('day', 'type')
        .annotate(count=Count('id'))
        .order_by()
    )
    for row in rows:
        bucket = buckets.get(row['day'])
        if bucket is None:
            continue
        key = 'files' if row['type'] in FILE_ACTIVITY_TYPES else 'comments'
        bucket[key] += row['count']

    return [
        {'date': day.isoformat(), 'files': counts['files'], 'comments': counts['comments']}
        for day, counts in sorted(buckets.items())
    ]


def get_team_overview():
    """
    Team page listing: every project member once, with their counts, the
    share of all files and of all comments they authored, and their
    contribution percentage.
    """
    contributions = {row['user_id']: row for row in get_contributions()}
    total_files = sum(row['files_count'] for row in contributions.values())
    total_comments = sum(row['comments_count'] for row in contributions.values())

    members = (
        ProjectMember.objects
        .select_related('user')
        .order_by('project_id', 'joined_at', 'id')
    )

    team = []
    seen = set()
    for member in members:
        user = member.user
        if user.id in seen:
            continue
        seen.add(user.id)

        contribution = contributions.get(user.id, {})
        files_count = contribution.get('files_count', 0)
        comments_count = contribution.get('comments_count', 0)

        team.append({
            'id': user.id,
            'name': user.display_name,
            'email': user.display_email,
            'avatar_url': user.avatar_url,
            'stats': {
                'files': files_count,
                'comments': comments_count,
                'files_percentage': 100 * files_count / total_files if total_files else 0,
                'comments_percentage': 100 * comments_count / total_comments if total_comments else 0,
                'contribution_percentage': contribution.get('percentage', 0),
            },
        })

    return team
