from .serializer import Serializer
