"""Modele danych współdzielone przez silnik analizy."""

from . import models
from .models import AnalysisResult, AnalysisSource, Artifact, ArtifactTag, FileProfile, ForensicReport

__all__ = [
	"models",
	"AnalysisResult",
	"AnalysisSource",
	"Artifact",
	"ArtifactTag",
	"FileProfile",
	"ForensicReport",
]
