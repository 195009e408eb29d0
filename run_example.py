import tempfile
from pathlib import Path
import io
from PIL import Image
from postercrop.controllers.archive import archive_filename, write_archive
from postercrop.controllers.batch import run_batch
from postercrop.models.crop import CropState
from postercrop.models.settings import BatchItem, OutputOptions

tmp = Path(tempfile.gettempdir()) / 'postercrop_example'
tmp.mkdir(parents=True, exist_ok=True)

buf = io.BytesIO()
Image.new('RGB', (1200, 1600), (128, 64, 32)).save(buf, format='JPEG')

item = BatchItem(
    source=buf.getvalue(), filename='in.jpg',
    crop=CropState(x=25, y=-40, scale=1.2),
    options=OutputOptions(include_pdf_set=False, include_resize=True, resize_percentage=25),
)

results = run_batch([item], reference_width=500)
out = write_archive(results, tmp / archive_filename(results))
for f in results[0].files:
    print(f.name, f.declared_dimensions, f.size_display)
print('Saved:', out)
