"""
Contact form relay.
"""

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.accounts.utils import get_current_account
from apps.core.throttles import ContactThrottle
from apps.help.serializers import ContactMessageSerializer
from apps.mailers.mailer import LifecycleMailer


class ContactUsView(APIView):
    """
    Forward a contact form message to support.

    POST /help/contact_us/
    Responds 400 when the message is missing, otherwise an empty 200.
    """

    permission_classes = [AllowAny]
    throttle_classes = [ContactThrottle]

    def post(self, request):
        serializer = ContactMessageSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        LifecycleMailer().contact_us(get_current_account(request), serializer.validated_data)
        return Response(status=status.HTTP_200_OK)
