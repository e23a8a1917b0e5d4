"""
Builders package for PDF Composer.

- DocumentAssembler: HTML document handed to the rendering engine
- MetadataWriter: PDF info-dictionary injection
- PdfBuilder: Concurrent batch of one PDF per source document
"""
