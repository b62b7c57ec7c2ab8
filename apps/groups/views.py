from django.db.models import F, Q
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from core.exceptions import ResourceNotFoundException, ValidationException
from core.mixins import AuditLogMixin
from core.permissions import IsAdmin
from .capacity import with_registered_count
from .models import Group
from .serializers import GroupPublicSerializer, GroupSerializer, GroupWriteSerializer
from .signals import group_changed


class PublicGroupListView(APIView):
    """
    GET /api/groups/public/

    Groups that can still accept a registration: unlimited groups
    (maxCompanies = 0) and groups whose registered count is below capacity.
    """
    permission_classes = [AllowAny]

    def get(self, request):
        qs = with_registered_count().filter(
            Q(max_companies=0) | Q(registered_count__lt=F("max_companies"))
        )
        return Response(GroupPublicSerializer(qs, many=True).data, status=status.HTTP_200_OK)


class PublicAllGroupsView(APIView):
    """
    GET /api/groups/public/all/  → every group, full ones included (display only)
    """
    permission_classes = [AllowAny]

    def get(self, request):
        qs = with_registered_count()
        return Response(GroupPublicSerializer(qs, many=True).data, status=status.HTTP_200_OK)


class GroupListCreateView(AuditLogMixin, APIView):
    """
    GET  /api/groups/  → all groups with occupancy (admin)
    POST /api/groups/  → create a group (admin)
        Body: name, date (YYYY-MM-DD), timeFrom, timeTo, day?, maxCompanies? (0 = unlimited)
    """
    permission_classes = [IsAdmin]

    def get(self, request):
        qs = with_registered_count()
        return Response(GroupSerializer(qs, many=True).data, status=status.HTTP_200_OK)

    def post(self, request):
        serializer = GroupWriteSerializer(data=request.data)
        if not serializer.is_valid():
            raise ValidationException(serializer.errors)

        group = serializer.save()
        self.log_action("CREATE_GROUP", group.name, f"max={group.max_companies}")
        group_changed.send(sender=Group, group_id=group.pk, action="created")

        group = with_registered_count().get(pk=group.pk)
        return Response(
            {"message": "Group created successfully.", "group": GroupSerializer(group).data},
            status=status.HTTP_201_CREATED,
        )


class GroupDetailView(AuditLogMixin, APIView):
    """
    GET    /api/groups/{id}/
    PUT    /api/groups/{id}/  → partial update
    DELETE /api/groups/{id}/  → companies in the group are kept, with no group
    """
    permission_classes = [IsAdmin]

    def _get_group(self, group_id):
        try:
            return with_registered_count().get(pk=group_id)
        except Group.DoesNotExist:
            raise ResourceNotFoundException("Group not found.")

    def get(self, request, group_id):
        return Response(GroupSerializer(self._get_group(group_id)).data, status=status.HTTP_200_OK)

    def put(self, request, group_id):
        group = self._get_group(group_id)
        serializer = GroupWriteSerializer(group, data=request.data, partial=True)
        if not serializer.is_valid():
            raise ValidationException(serializer.errors)

        serializer.save()
        self.log_action("UPDATE_GROUP", group.name, f"fields={sorted(request.data.keys())}")
        group_changed.send(sender=Group, group_id=group.pk, action="updated")

        return Response(
            {"message": "Group updated successfully.", "group": GroupSerializer(self._get_group(group_id)).data},
            status=status.HTTP_200_OK,
        )

    def delete(self, request, group_id):
        group = self._get_group(group_id)
        name, detached = group.name, group.registered_count
        group.delete()
        self.log_action("DELETE_GROUP", name, f"{detached} company(ies) left without group")
        group_changed.send(sender=Group, group_id=group_id, action="deleted")
        return Response({"message": f"Group '{name}' deleted."}, status=status.HTTP_200_OK)
