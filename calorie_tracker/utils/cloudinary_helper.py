import io
import time
import cloudinary.uploader
from PIL import Image

def upload_food_image(image: Image.Image, user_id: str, folder="food-images"):
    """
    Upload a meal photo to Cloudinary under <folder>/<user_id>/ and return its
    public URL. Errors from the Cloudinary client propagate to the caller.
    """
    buffer = io.BytesIO()
    image.save(buffer, format="JPEG", quality=90)
    buffer.seek(0)

    result = cloudinary.uploader.upload(
        buffer,
        folder=f"{folder}/{user_id}",
        public_id=str(int(time.time() * 1000)),
        resource_type="image"
    )

    secure_url = result.get("secure_url")
    if not secure_url:
        raise RuntimeError("Cloudinary upload returned no URL")
    return secure_url
