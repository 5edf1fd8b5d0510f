"""
Comment model.
"""
from django.db import models
from django.conf import settings


class Comment(models.Model):
    """A comment on a file."""

    file = models.ForeignKey(
        'files.File',
        on_delete=models.CASCADE,
        related_name='comments'
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        related_name='comments'
    )
    text = models.TextField()

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        db_table = 'comments'
        ordering = ['-created_at', '-id']

    def __str__(self):
        return f"Comment by {self.user_id} on {self.file_id}"
